"""
Style markup for grid cells.

Cells are often colored (directories in blue, executables in green, etc) and
the escape codes that do the coloring take no room on screen.  This module
renders a tiny SGML style language, VTML, into VT100 opcodes while keeping
track of the visible length so the grid can measure styled text correctly.
"""

import functools
import html.parser
import itertools

__public__ = ['StyledText', 'stylize']

TAGS = {
    'b': 1,
    'dim': 2,
    'i': 3,
    'u': 4,
    'blink': 5,
    'reverse': 7,
    'black': 30,
    'red': 31,
    'green': 32,
    'yellow': 33,
    'blue': 34,
    'magenta': 35,
    'cyan': 36,
    'white': 37,
    'bgblack': 40,
    'bgred': 41,
    'bggreen': 42,
    'bgyellow': 43,
    'bgblue': 44,
    'bgmagenta': 45,
    'bgcyan': 46,
    'bgwhite': 47,
}
RESET = '\033[0m'


def opcode(tag):
    return '\033[%dm' % TAGS[tag]


@functools.total_ordering
class StyledText(object):
    """ A str-like object that has an adjusted length to compensate for
    nonvisual vt100 opcodes which do not occupy space in the output. """

    __slots__ = [
        'values',
        'visual_len'
    ]

    def __init__(self, *values, length_hint=None):
        self.values = values
        if length_hint is None:
            self.visual_len = sum(len(x) for x in values
                                  if not self.is_opcode(x))
        else:
            self.visual_len = length_hint

    @staticmethod
    def is_opcode(item):
        """ Is the string item a vt100 op code. Empty strings return True."""
        return not item or item[0] == '\033'

    def __len__(self):
        return self.visual_len

    def __str__(self):
        return ''.join(self.values)

    def __repr__(self):
        return repr(str(self))

    def __hash__(self):
        return hash(str(self))

    def __eq__(self, other):
        return str(self) == str(other)

    def __lt__(self, other):
        return str(self) < str(other)

    def __add__(self, other):
        if isinstance(other, str):
            other = type(self)(other)
        elif not isinstance(other, StyledText):
            raise TypeError("Invalid concatenation type: %s" % type(other))
        return type(self)(*self.values + other.values)

    def __radd__(self, other):
        if not isinstance(other, str):
            raise TypeError("Invalid concatenation type: %s" % type(other))
        return type(self)(other) + self

    def text(self):
        """ Return just the text content of this string without opcodes. """
        return ''.join(itertools.filterfalse(self.is_opcode, self.values))

    def plain(self):
        """ Similar to `text` but returns a valid StyledText instance. """
        return type(self)(*itertools.filterfalse(self.is_opcode, self.values))

    def ljust(self, width, fillchar=' '):
        if width <= self.visual_len:
            return self
        pad = (fillchar * (width - self.visual_len),)
        return type(self)(*self.values + pad, length_hint=width)

    def rjust(self, width, fillchar=' '):
        if width <= self.visual_len:
            return self
        pad = (fillchar * (width - self.visual_len),)
        return type(self)(*pad + self.values, length_hint=width)


class MarkupParser(html.parser.HTMLParser):
    """ Turn VTML tags into vt100 opcodes.  Tags we don't know about are
    treated as regular text. """

    escape = '&'
    escape_sentinel = chr(0xe2c6)  # private use area

    def feed(self, data):
        """ Entity references are not part of VTML, so the ampersand is
        swapped for a reserved codepoint while the parser runs. """
        if self.escape_sentinel in data:
            raise ValueError("Reserved codepoint in markup")
        super().feed(data.replace(self.escape, self.escape_sentinel))

    def reset(self):
        self.buf = []
        self.open_tags = []
        self.endtag_pos = 0
        super().reset()

    def handle_starttag(self, tag, attrs):
        if tag not in TAGS:
            return self.handle_data(self.get_starttag_text())
        self.open_tags.append(tag)

    def handle_startendtag(self, tag, attrs):
        self.handle_data(self.get_starttag_text())

    def parse_endtag(self, i):
        self.endtag_pos = i
        return super().parse_endtag(i)

    def get_endtag_text(self):
        """ The end tag as written; `handle_endtag` only sees the lowercased
        name. """
        start = self.endtag_pos
        end = self.rawdata.find('>', start)
        return self.rawdata[start:end + 1 if end != -1 else None]

    def handle_endtag(self, tag):
        if tag not in TAGS:
            return self.handle_data(self.get_endtag_text())
        if not self.open_tags or self.open_tags[-1] != tag:
            raise SyntaxError("Bad close tag: %s" % tag)
        del self.open_tags[-1]
        self.buf.append(RESET)

    def handle_data(self, data):
        self.buf.extend(opcode(x) for x in self.open_tags)
        self.buf.append(data.replace(self.escape_sentinel, self.escape))

    def handle_comment(self, data):
        self.handle_data('<!--%s-->' % data)

    def handle_decl(self, decl):
        self.handle_data('<!%s>' % decl)

    def handle_pi(self, data):
        self.handle_data('<?%s>' % data)

    def unknown_decl(self, data):
        self.handle_data('<![%s]>' % data)

    def close(self):
        super().close()
        if self.open_tags:
            self.buf.append(RESET)

    def getvalue(self):
        return StyledText(*self.buf)


def stylize(markup, plain=False, strict=False):
    """ Render VTML markup into a StyledText.  Bad markup is returned as
    unstyled text unless `strict` is set. """
    if isinstance(markup, StyledText):
        return markup.plain() if plain else markup
    parser = MarkupParser(convert_charrefs=False)
    try:
        parser.feed(str(markup))
        parser.close()
    except Exception:
        if strict:
            raise
        return StyledText(str(markup))
    value = parser.getvalue()
    return value.plain() if plain else value
