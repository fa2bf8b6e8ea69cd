"""Common resources for the fundeps CLI application."""
import logging
import logging.config
import os
import sys
from dataclasses import astuple, dataclass
from enum import IntEnum
from .._typing import (
    Any,
    Dict,
    Literal,
    Mapping,
    Optional,
    TextIO,
    Tuple,
)
from .. import DependencySet, ParseError


applogger = logging.getLogger('app-fundeps')


class ExitCode(IntEnum):
    """Status code (errorlevel) to return when program exits."""
    OK = 0     # Success.
    ERR = 1    # General error.
    USAGE = 2  # Incorrect usage (invalid options or missing args).


def read_dependencies(
    path: str, stdin: Optional[TextIO] = None
) -> Optional[DependencySet]:
    """Read and parse the dependency set at *path* (``'-'`` reads
    from *stdin*). Problems are logged and None is returned.
    """
    try:
        if path == '-':
            text = (stdin or sys.stdin).read()
        else:
            with open(path, encoding='utf-8') as fh:
                text = fh.read()
    except OSError as e:
        applogger.error(f'cannot read dependencies: {e}')
        return None

    try:
        return DependencySet.from_string(text)
    except ParseError as e:
        applogger.error(f'cannot parse dependencies: {e}')
        return None


# ============================
# Terminal Color Configuration
# ============================

@dataclass(frozen=True)
class StyleCodes:
    """Style codes to use for application output.

    The codes are written in-line with output text. When a stream is
    connected to a terminal, ANSI control codes provide colors and
    emphasis; otherwise every code is an empty string.
    """
    info: str = ''
    warning: str = ''
    error: str = ''
    critical: str = ''
    reset: str = ''
    bright: str = ''


# ANSI terminal control codes.
ansi_codes = {
    'info': '\33[38;5;33m',                   # blue
    'warning': '\33[38;5;214m',               # yellow
    'error': '\33[38;5;196m',                 # red
    'critical': '\33[48;5;196m\33[38;5;16m',  # red background
    'reset': '\33[0m',                        # reset styles
    'bright': '\33[1m',                       # bright text
}


def get_stream_styles(
    *,
    environ: Optional[Mapping] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Tuple[StyleCodes, StyleCodes]:
    """Get terminal styles for ``stdout`` and ``stderr`` streams.

    .. code-block:: python

        >>> stdout_style, stderr_style = get_stream_styles()

    Styles are disabled when "NO_COLOR" is set, when "TERM" is "dumb",
    or when a stream is redirected.
    """
    no_style = StyleCodes()

    if environ is None:
        environ = os.environ
    if environ.get('NO_COLOR') or environ.get('TERM') == 'dumb':
        return (no_style, no_style)  # <- EXIT!

    ansi_style = StyleCodes(**ansi_codes)
    stdout_style = ansi_style if (stdout or sys.stdout).isatty() else no_style
    stderr_style = ansi_style if (stderr or sys.stderr).isatty() else no_style

    # Windows consoles need colorama to interpret ANSI codes.
    if sys.platform == 'win32' and ansi_style in (stdout_style, stderr_style):
        import colorama
        colorama.just_fix_windows_console()

    return (stdout_style, stderr_style)


# ====================
# Logger Configuration
# ====================

class StyledFormatter(logging.Formatter):
    """Formatter to wrap each formatted LogRecord in the style code
    for its level.
    """
    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        style: Literal['%', '{', '$'] = '%',
        *,
        styles: StyleCodes,
    ) -> None:
        super().__init__(fmt, datefmt, style)
        self.styles = styles
        self.level_codes = {
            logging.INFO: styles.info,
            logging.WARNING: styles.warning,
            logging.ERROR: styles.error,
            logging.CRITICAL: styles.critical,
        }

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        code = self.level_codes.get(record.levelno)
        if code:
            return f'{code}{text}{self.styles.reset}'
        return text


def get_formatter_config(style_codes: StyleCodes) -> Dict[str, Any]:
    """Return a `dictConfig()` formatter entry that uses styled text
    when *style_codes* define any styles.
    """
    fmt = '%(levelname)s: %(message)s'
    if not any(astuple(style_codes)):
        return {'format': fmt}  # <- EXIT!
    return {'()': StyledFormatter, 'fmt': fmt, 'styles': style_codes}


def configure_applogger(
    applogger: logging.Logger, style_codes: StyleCodes
) -> None:
    """Configure handler and formatter for given *applogger*."""
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'cli_formatter': get_formatter_config(style_codes),
        },
        'handlers': {
            'cli_handler': {
                'class': 'logging.StreamHandler',
                'formatter': 'cli_formatter',
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            applogger.name: {
                'handlers': ['cli_handler'],
                'propagate': False,
            },
        },
    })
