"""
Right aligned numbers flowing across with a literal separator.
"""

import termgrid

options = termgrid.GridOptions()
options.change_direction(termgrid.Direction.left_to_right)
options.change_padding(termgrid.Padding.literal(' | '))
grid = termgrid.Grid(options)
grid.add(*[2 ** x for x in range(20)], alignment=termgrid.Alignment.right)
for width in (40, 60, 100):
    display = grid.fit_into_width(width)
    print('width=%d columns=%d' % (width, display.dimensions.columns))
    display.print()
