"""
Pack a list of cells into as few lines as a display width allows.
"""

import collections
import enum
import logging
import math
import shutil
import sys
from . import markup

__public__ = ['Alignment', 'Direction', 'Cell', 'Padding', 'GridOptions',
              'Dimensions', 'Grid', 'Display', 'InvalidOption', 'columnize']

logger = logging.getLogger(__name__)

Alignment = enum.Enum('Alignment', 'left right')
Direction = enum.Enum('Direction', 'left_to_right top_to_bottom')

direction_aliases = {
    'ltr': Direction.left_to_right,
    'across': Direction.left_to_right,
    'left_to_right': Direction.left_to_right,
    'ttb': Direction.top_to_bottom,
    'down': Direction.top_to_bottom,
    'top_to_bottom': Direction.top_to_bottom,
}


class InvalidOption(ValueError):
    """ A grid option value could not be understood. """
    pass


def terminal_width(file=None, fallback=80):
    """ Width of the terminal when writing to stdout, otherwise a fixed
    fallback since pipes and files don't have a width. """
    if file is None or file is sys.stdout:
        return shutil.get_terminal_size((fallback, 0))[0]
    return fallback


def cell_index(row, column, direction, columns, lines):
    """ Position in the flat cell list of the cell shown at `row`, `column`.
    This mapping is shared by the fitting search and the renderer. """
    if direction is Direction.left_to_right:
        return row * columns + column
    elif direction is Direction.top_to_bottom:
        return column * lines + row
    else:
        raise ValueError("Invalid direction: %r" % (direction,))


class Cell(collections.namedtuple('Cell', 'contents, width, alignment')):
    """ One piece of text in the grid.  The width is measured once when the
    cell is made; for StyledText it is the visible length. """

    __slots__ = ()

    def __new__(cls, contents, alignment=Alignment.left):
        if not isinstance(contents, markup.StyledText):
            contents = str(contents)
        return super().__new__(cls, contents, len(contents), alignment)

    @property
    def text(self):
        """ Contents without any style opcodes. """
        if isinstance(self.contents, markup.StyledText):
            return self.contents.text()
        return self.contents

    def aligned(self, alignment):
        return self._replace(alignment=alignment)

    def pad(self, width):
        """ Justify contents to `width` according to our alignment. """
        if self.alignment is Alignment.right:
            return self.contents.rjust(width)
        return self.contents.ljust(width)


class Padding(object):
    """ The separator put between columns.  It is either some number of
    spaces or a literal string, never both. """

    __slots__ = ('spaces', 'text')

    def __init__(self, spaces=0, text=''):
        if not isinstance(spaces, int) or spaces < 0:
            raise ValueError("Invalid padding spaces: %r" % (spaces,))
        if not isinstance(text, str):
            raise ValueError("Invalid padding text: %r" % (text,))
        if spaces and text:
            raise ValueError("Padding is either spaces or text")
        self.spaces = spaces
        self.text = text

    @classmethod
    def whitespace(cls, spaces):
        return cls(spaces=spaces)

    @classmethod
    def literal(cls, text):
        return cls(text=text)

    @property
    def width(self):
        return self.spaces + len(self.text)

    def render(self, alignment):
        if alignment is Alignment.left:
            return ' ' * self.spaces + self.text
        elif alignment is Alignment.right:
            return self.text + ' ' * self.spaces
        return ''

    def __eq__(self, other):
        if not isinstance(other, Padding):
            return NotImplemented
        return (self.spaces, self.text) == (other.spaces, other.text)

    def __hash__(self):
        return hash((self.spaces, self.text))

    def __repr__(self):
        if self.text:
            return '<Padding literal %r>' % self.text
        return '<Padding spaces=%d>' % self.spaces


class GridOptions(object):
    """ Layout knobs for a Grid: the direction cells flow in and the padding
    between columns. """

    def __init__(self, direction=Direction.left_to_right, padding=None):
        self.change_direction(direction)
        self.change_padding(2 if padding is None else padding)

    def __repr__(self):
        return '<GridOptions direction=%s padding=%r>' % (
            self.direction.name, self.padding)

    def change_direction(self, direction):
        """ Accepts a `Direction` or one of the names in
        `direction_aliases`. """
        if not isinstance(direction, Direction):
            try:
                direction = direction_aliases[str(direction).lower()]
            except KeyError:
                raise InvalidOption("Invalid direction: %r" % (direction,)) \
                    from None
        self.direction = direction

    def change_padding(self, padding):
        """ An int means that many spaces and a str is used literally. """
        if isinstance(padding, bool):
            raise InvalidOption("Invalid padding: %r" % (padding,))
        try:
            if isinstance(padding, int):
                padding = Padding.whitespace(padding)
            elif isinstance(padding, str):
                padding = Padding.literal(padding)
        except ValueError as e:
            raise InvalidOption(str(e)) from None
        if not isinstance(padding, Padding):
            raise InvalidOption("Invalid padding: %r" % (padding,))
        self.padding = padding


class Dimensions(collections.namedtuple('Dimensions', 'lines, widths')):
    """ The shape of a fitted grid: number of lines and each column's
    width. """

    __slots__ = ()

    @property
    def columns(self):
        return len(self.widths)

    def total_width(self, padding):
        if not self.widths:
            return 0
        return sum(self.widths) + padding.width * (len(self.widths) - 1)


class Grid(object):
    """ An ordered collection of cells that can be fitted to a width.

    The widest cell and the sum of all cell widths are kept up to date as
    cells are added; they bound the column search. """

    def __init__(self, options=None):
        self.options = options if options is not None else GridOptions()
        self._cells = []
        self.widest_cell_width = 0
        self.total_cell_width = 0

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __repr__(self):
        return '<Grid cells=%d %r>' % (len(self._cells), self.options)

    @property
    def cells(self):
        return tuple(self._cells)

    def add_cell(self, cell):
        if cell.width > self.widest_cell_width:
            self.widest_cell_width = cell.width
        self.total_cell_width += cell.width
        self._cells.append(cell)

    def add(self, *contents, alignment=Alignment.left):
        """ Make cells from each argument and add them. """
        for x in contents:
            self.add_cell(Cell(x, alignment=alignment))

    def sort(self):
        """ Order cells by their text, in place. """
        self._cells.sort(key=lambda x: x.text)

    def column_dimensions(self, columns):
        """ Dimensions for laying out our cells in `columns` columns.  With
        top to bottom flow, trailing columns the mapping leaves empty are
        dropped. """
        count = len(self._cells)
        if not count:
            return Dimensions(0, ())
        columns = max(1, min(columns, count))
        lines = math.ceil(count / columns)
        direction = self.options.direction
        if direction is Direction.top_to_bottom:
            columns = math.ceil(count / lines)
        widths = [0] * columns
        for row in range(lines):
            for col in range(columns):
                i = cell_index(row, col, direction, columns, lines)
                if i < count and self._cells[i].width > widths[col]:
                    widths[col] = self._cells[i].width
        return Dimensions(lines, tuple(widths))

    def dimensions_for(self, max_width):
        """ Find the dimensions with the most columns that fit inside
        `max_width`.  If even one column is too wide we still return one
        column and let those lines overflow. """
        count = len(self._cells)
        if not count:
            return Dimensions(0, ())
        padding = self.options.padding
        if self.total_cell_width + padding.width * (count - 1) <= max_width:
            return Dimensions(1, tuple(x.width for x in self._cells))
        step = self.widest_cell_width + padding.width
        if step:
            upper = min(count, (max_width + padding.width) // step)
        else:
            upper = count
        for columns in range(upper, 0, -1):
            dimensions = self.column_dimensions(columns)
            total = dimensions.total_width(padding)
            if total <= max_width:
                logger.debug("Fit %d cells into %d columns (%d/%d wide)",
                             count, dimensions.columns, total, max_width)
                return dimensions
            logger.debug("%d columns too wide: %d > %d", columns, total,
                         max_width)
        logger.debug("Widest cell (%d) exceeds width %d; using one column",
                     self.widest_cell_width, max_width)
        return self.column_dimensions(1)

    def fit_into_width(self, max_width):
        return Display(self._cells, self.options,
                       self.dimensions_for(max_width))

    def fit_into_columns(self, columns):
        """ Lay out in a fixed number of columns regardless of width. """
        return Display(self._cells, self.options,
                       self.column_dimensions(columns))


class Display(object):
    """ A fitted snapshot of a grid, ready to render.  Later changes to the
    grid don't affect it. """

    def __init__(self, cells, options, dimensions):
        self.cells = tuple(cells)
        self.direction = options.direction
        self.padding = options.padding
        self.dimensions = dimensions

    def __str__(self):
        return ''.join('%s\n' % x for x in self.lines())

    def __repr__(self):
        return '<Display lines=%d widths=%r>' % self.dimensions

    @property
    def width(self):
        return self.dimensions.total_width(self.padding)

    @property
    def line_count(self):
        return self.dimensions.lines

    def rows(self):
        """ Yield a list of (cell, column_width) pairs for each line.  The
        last line can be short. """
        lines, widths = self.dimensions
        count = len(self.cells)
        for row in range(lines):
            pairs = []
            for col, width in enumerate(widths):
                i = cell_index(row, col, self.direction, len(widths), lines)
                if i >= count:
                    break
                pairs.append((self.cells[i], width))
            yield pairs

    def lines(self):
        for row in self.rows():
            buf = []
            last = len(row) - 1
            for col, (cell, width) in enumerate(row):
                if col < last:
                    buf.append(str(cell.pad(width)))
                    buf.append(self.padding.render(cell.alignment))
                elif cell.alignment is Alignment.left:
                    buf.append(str(cell.contents))
                else:
                    buf.append(str(cell.pad(width)))
            yield ''.join(buf)

    def print(self, file=None):
        for x in self.lines():
            print(x, file=file)


def columnize(items, width=None, file=sys.stdout, direction='down',
              padding=2, sort=False):
    """ Smart display width handling when showing a list of stuff.  Items
    may contain VTML markup. """
    grid = Grid(GridOptions(direction=direction, padding=padding))
    for x in items:
        grid.add_cell(Cell(markup.stylize(x)))
    if not grid:
        return
    if sort:
        grid.sort()
    if width is None:
        width = terminal_width(file)
    grid.fit_into_width(width).print(file=file)
