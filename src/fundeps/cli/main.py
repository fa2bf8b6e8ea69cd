"""Main command line application function."""
import argparse
import logging
import os
import sys
from .._typing import (
    List,
    Optional,
    TextIO,
)
from .. import __version__, AttributeSet, ParseError
from . import (
    command_closure,
    command_cover,
    command_keys,
)
from .common import (
    ExitCode,
    configure_applogger,
    get_stream_styles,
)


class AttributeSetType(object):
    """Factory for creating AttributeSet argument types.

    This class is used when adding arguments to an ArgumentParser
    instance::

        parser = argparse.ArgumentParser()
        parser.add_argument('--attributes', type=AttributeSetType())
    """
    def __init__(self, allow_empty: bool = False) -> None:
        self._allow_empty = allow_empty

    def __call__(self, string: str) -> AttributeSet:
        try:
            attributes = AttributeSet.from_string(string)
        except ParseError as e:
            raise argparse.ArgumentTypeError(f'invalid attributes {string!r}: {e}')

        if not attributes and not self._allow_empty:
            raise argparse.ArgumentTypeError('attributes cannot be empty')

        return attributes


def positive_int(string: str) -> int:
    """Argument type for integers greater than zero."""
    try:
        value = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid int value: {string!r}')

    if value < 1:
        raise argparse.ArgumentTypeError(f'must be greater than zero: {value}')
    return value


def get_parser() -> argparse.ArgumentParser:
    """Get argument parser for fundeps command line interface."""

    class FundepsArgumentParser(argparse.ArgumentParser):
        def parse_args(self, args=None, namespace=None):
            if args is None:
                args = sys.argv[1:]  # Default to system args.

            if not args:
                self.print_help(sys.stderr)
                self.exit(ExitCode.USAGE)  # <- EXIT!

            return super().parse_args(args, namespace)

    # Define main parser.
    parser = FundepsArgumentParser(
        prog='fundeps',
        description='Reason about functional dependencies.',
        usage='%(prog)s COMMAND ... [-h] [--version]',
        epilog='Dependencies are read one per line, like "A, B -> C". '
               'Use "-" (or omit FILE) to read from stdin.',
    )
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    # Define subparsers for COMMAND.
    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        metavar='COMMAND',
        prog='fundeps',
    )

    # Closure command.
    parser_closure = subparsers.add_parser(
        'closure',
        help='show closure of a set of attributes',
        description='Show the closure of a set of attributes.',
    )
    parser_closure.add_argument('file', nargs='?', default='-',
                                help='dependency file', metavar='FILE')
    parser_closure.add_argument('-a', '--attributes', required=True,
                                type=AttributeSetType(),
                                help='comma-separated attribute names',
                                metavar='ATTRS')
    parser_closure.set_defaults(func=command_closure.write_closure)

    # Cover command.
    parser_cover = subparsers.add_parser(
        'cover',
        help='show minimal cover',
        description='Show the minimal cover of a dependency set.',
    )
    parser_cover.add_argument('file', nargs='?', default='-',
                              help='dependency file', metavar='FILE')
    parser_cover.set_defaults(func=command_cover.write_cover)

    # Keys command.
    parser_keys = subparsers.add_parser(
        'keys',
        help='show candidate keys',
        description='Show all candidate keys of a dependency set.',
    )
    parser_keys.add_argument('file', nargs='?', default='-',
                             help='dependency file', metavar='FILE')
    parser_keys.add_argument('-u', '--universe', type=AttributeSetType(),
                             help='all attributes of the relation '
                                  '(default: attributes used in FILE)',
                             metavar='ATTRS')
    parser_keys.add_argument('--max-keys', type=positive_int,
                             help='stop with an error if more keys are found',
                             metavar='N')
    parser_keys.set_defaults(func=command_keys.write_keys)

    # Demo command.
    subparsers.add_parser(
        'demo',
        help='show results for a built-in example',
        description='Show closure, cover, and keys for a built-in example.',
    )

    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
) -> ExitCode:
    applogger = logging.getLogger('app-fundeps')
    stdout_style, stderr_style = get_stream_styles()
    configure_applogger(applogger, stderr_style)

    if stdin is None:
        stdin = sys.stdin

    parser = get_parser()
    if argv is None:
        argv = sys.argv[1:]  # Default to command line arguments.
    args = parser.parse_args(argv)

    args.stdin = stdin
    args.stdout_style = stdout_style
    args.stderr_style = stderr_style

    if args.command == 'demo':
        from . import command_demo
        return command_demo.write_demo(args)

    if getattr(args, 'file', None) == '-' and stdin.isatty():
        applogger.error('no FILE given and stdin is not redirected')
        return ExitCode.USAGE

    try:
        return args.func(args)
    except BrokenPipeError:
        os._exit(ExitCode.OK)  # Downstream stopped early; exit with OK.
