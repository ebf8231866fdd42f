"""
A logging handler that's tty aware.
"""

import logging
from . import markup

__public__ = ['StyledHandler', 'StyledFormatter', 'setup_logging']


class StyledHandler(logging.StreamHandler):
    """ Render VTML in log messages to colorize and embolden logs.  Markup is
    stripped when the stream is not a terminal. """

    def __init__(self, *args, fmt=None, level_prefmt=None, field_prefmt=None,
                 **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(StyledFormatter(fmt=fmt, level_prefmt=level_prefmt,
                                          field_prefmt=field_prefmt))

    def is_terminal(self):
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def format(self, record):
        plain = not self.is_terminal()
        return str(markup.stylize(super().format(record), plain=plain))


class StyledFormatter(logging.Formatter):

    default_fmt = ' '.join((
        '[%(name)s]',
        '[%(levelname)s]',
        '%(message)s'
    ))
    default_level_prefmt = {
        logging.DEBUG: '<dim>%s</dim>',
        logging.INFO: '%s',
        logging.WARNING: '<b>%s</b>',
        logging.ERROR: '<red>%s</red>',
        logging.CRITICAL: '<red><b>%s</b></red>',
    }
    default_field_prefmt = {
        "asctime": '<blue>%s</blue>',
        "filename": '<magenta>%s</magenta>',
        "funcName": '<yellow>%s</yellow>',
        "lineno": '<cyan>%s</cyan>',
        "name": '<green>%s</green>',
    }

    def __init__(self, fmt=None, field_prefmt=None, level_prefmt=None,
                 **kwargs):
        fmt = fmt or self.default_fmt
        field_prefmt = field_prefmt or self.default_field_prefmt
        self.field_prefmt = dict((k, v) for k, v in field_prefmt.items()
                                 if '%%(%s)' % k in fmt)
        self.level_prefmt = level_prefmt or self.default_level_prefmt
        self.asctime_prefmt = self.field_prefmt.pop('asctime', None)
        super().__init__(fmt=fmt, **kwargs)

    def formatTime(self, *args, **kwargs):
        s = super().formatTime(*args, **kwargs)
        return self.asctime_prefmt % s if self.asctime_prefmt else s

    def format(self, record):
        # Work on a copy; other handlers may share the record.
        record = logging.makeLogRecord(record.__dict__)
        prefmt = self.level_prefmt.get(record.levelno, '%s')
        record.levelname = prefmt % record.levelname
        for key, fmt in self.field_prefmt.items():
            setattr(record, key, fmt % getattr(record, key))
        return super().format(record)


def setup_logging(level=logging.WARNING, stream=None, name='termgrid'):
    """ Attach a StyledHandler to our package logger, replacing any one we
    attached before. """
    logger = logging.getLogger(name)
    for x in list(logger.handlers):
        if isinstance(x, StyledHandler):
            logger.removeHandler(x)
    handler = StyledHandler(stream)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
