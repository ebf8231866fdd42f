"""
List a directory the way `ls` does, with directories in blue.
"""

import os
import sys
import termgrid

path = sys.argv[1] if len(sys.argv) > 1 else '.'
grid = termgrid.Grid(termgrid.GridOptions(direction='down'))
for entry in os.scandir(path):
    if entry.is_dir():
        grid.add(termgrid.stylize('<blue>%s</blue>' % entry.name))
    else:
        grid.add(entry.name)
grid.sort()
width = termgrid.grid.terminal_width()
print(grid.fit_into_width(width), end='')
