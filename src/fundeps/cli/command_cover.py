"""Implementation for "cover" command."""
import argparse
import logging
import sys

from .common import ExitCode, read_dependencies


applogger = logging.getLogger('app-fundeps')


def write_cover(args: argparse.Namespace) -> ExitCode:
    """Write the minimal cover, one dependency per line, to stdout."""
    dependencies = read_dependencies(args.file, args.stdin)
    if dependencies is None:
        return ExitCode.ERR

    cover = dependencies.minimal_cover()
    for dependency in cover:
        sys.stdout.write(f'{dependency}\n')

    before, after = len(dependencies), len(cover)
    applogger.info(
        f"reduced {before} dependenc{'ies' if before != 1 else 'y'} "
        f"to {after} dependenc{'ies' if after != 1 else 'y'}"
    )
    return ExitCode.OK
