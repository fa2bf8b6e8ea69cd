"""Implementation for "closure" command."""
import argparse
import sys

from .common import ExitCode, read_dependencies


def write_closure(args: argparse.Namespace) -> ExitCode:
    """Write the closure of ``args.attributes`` to stdout."""
    dependencies = read_dependencies(args.file, args.stdin)
    if dependencies is None:
        return ExitCode.ERR

    closure = args.attributes.closure(dependencies)
    sys.stdout.write(f'{closure}\n')
    return ExitCode.OK
