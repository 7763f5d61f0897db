"""Console logging setup for the command line tools."""

# Standard imports
import logging
import sys

# Third-party imports
import colorama

colorama.init()

class _ColoredFormatter(logging.Formatter):
    _COLORS = {
        'DEBUG': colorama.Fore.CYAN,
        'INFO': colorama.Fore.GREEN,
        'WARNING': colorama.Fore.YELLOW,
        'ERROR': colorama.Fore.RED,
        'CRITICAL': colorama.Fore.MAGENTA,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname, '')
        if color:
            record.levelname = (
                color + colorama.Style.BRIGHT + record.levelname
                + colorama.Style.RESET_ALL
            )
        return super().format(record)


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Sets up console logging with colors, function names and lines."""
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    log_format = (
        '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d'
        ' - %(message)s'
    )
    date_format = '%Y-%m-%d %H:%M:%S'

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = (
        _ColoredFormatter(log_format, datefmt=date_format)
        if sys.stdout.isatty()
        else logging.Formatter(log_format, datefmt=date_format)
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
