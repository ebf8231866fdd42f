"""
Print the lines of a file packed into columns, like `ls` does for names.
"""

import argparse
import logging
import sys
import termgrid
from termgrid import logging as tglogging

logger = logging.getLogger(__name__)
textfile = argparse.FileType('r', encoding='utf-8-sig')


def build_parser():
    parser = argparse.ArgumentParser(prog='gridcat', description=__doc__)
    parser.add_argument('file', nargs='?', type=textfile, default=sys.stdin,
                        help='one cell per line (default: stdin)')
    parser.add_argument('--width', type=int, help='maximum display width '
                        '(default: terminal width)')
    parser.add_argument('--columns', type=int, help='use exactly this many '
                        'columns instead of fitting to the width')
    flow = parser.add_mutually_exclusive_group()
    flow.add_argument('--across', dest='direction', action='store_const',
                      const='ltr', help='fill rows first')
    flow.add_argument('--down', dest='direction', action='store_const',
                      const='ttb', help='fill columns first')
    pad = parser.add_mutually_exclusive_group()
    pad.add_argument('--spaces', type=int, help='spaces between columns')
    pad.add_argument('--separator', help='literal text between columns')
    parser.add_argument('--sort', action='store_true', help='sort the cells')
    parser.add_argument('--markup', action='store_true',
                        help='render VTML tags such as <b> in the cells')
    parser.add_argument('--right', action='store_true',
                        help='right align the cells')
    parser.add_argument('--config', help='config file (default: '
                        '~/.termgrid_config)')
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser


def make_options(args):
    options = termgrid.options_from_config(termgrid.load_config(args.config))
    if args.direction is not None:
        options.change_direction(args.direction)
    if args.separator:
        options.change_padding(args.separator)
    elif args.spaces is not None:
        options.change_padding(args.spaces)
    return options


def read_lines(f):
    """ Yield the non-blank lines of `f` without line endings. """
    for line in f:
        line = line.rstrip('\r\n')
        if line.strip():
            yield line


def gridcat(argv=None, file=None):
    """ Run the tool and return an exit status. """
    args = build_parser().parse_args(argv)
    tglogging.setup_logging(logging.DEBUG if args.verbose else
                            logging.WARNING)
    if file is None:
        file = sys.stdout
    alignment = termgrid.Alignment.right if args.right else \
        termgrid.Alignment.left
    try:
        options = make_options(args)
        logger.debug("Using %r", options)
        grid = termgrid.Grid(options)
        for line in read_lines(args.file):
            if args.markup:
                line = termgrid.stylize(line)
            grid.add(line, alignment=alignment)
    except UnicodeDecodeError as e:
        logger.error("Input is not UTF-8: %s", e)
        return 1
    except (termgrid.InvalidOption, OSError) as e:
        logger.error(str(e))
        return 1
    finally:
        if args.file is not sys.stdin:
            args.file.close()
    if args.sort:
        grid.sort()
    if args.columns is not None:
        display = grid.fit_into_columns(args.columns)
    else:
        width = args.width
        if width is None:
            width = termgrid.grid.terminal_width(file)
        display = grid.fit_into_width(width)
        if display.width > width:
            logger.warning("Widest line (%d) exceeds width %d",
                           grid.widest_cell_width, width)
    display.print(file=file)
    return 0


def main():
    raise SystemExit(gridcat())
