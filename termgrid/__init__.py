"""
Public interface.
"""

import importlib

for x in ['grid', 'markup', 'config']:
    module = importlib.import_module('.%s' % x, 'termgrid')
    for sym in module.__public__:
        globals()[sym] = getattr(module, sym)
