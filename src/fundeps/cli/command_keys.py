"""Implementation for "keys" command."""
import argparse
import logging
import sys

from .. import TooManyKeysError
from .common import ExitCode, read_dependencies


applogger = logging.getLogger('app-fundeps')


def write_keys(args: argparse.Namespace) -> ExitCode:
    """Write candidate keys, one per line, to stdout."""
    dependencies = read_dependencies(args.file, args.stdin)
    if dependencies is None:
        return ExitCode.ERR

    try:
        keys = dependencies.candidate_keys(args.universe, max_keys=args.max_keys)
    except TooManyKeysError as e:
        applogger.error(f'cancelled: {e}')
        return ExitCode.ERR
    except ValueError as e:
        applogger.error(str(e))
        return ExitCode.ERR

    for key in keys:
        sys.stdout.write(f'{key}\n')

    applogger.info(f"found {len(keys)} candidate key{'s' if len(keys) != 1 else ''}")
    return ExitCode.OK
