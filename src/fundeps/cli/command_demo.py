"""Implementation for "demo" command."""
import argparse
import sys

from .. import AttributeSet, DependencySet
from .common import ExitCode


DEMO_DEPENDENCIES = [
    ('A', 'BC'),
    ('B', 'CE'),
    ('A', 'E'),
    ('AC', 'H'),
    ('D', 'B'),
]

DEMO_ATTRIBUTES = 'A'


def write_demo(args: argparse.Namespace) -> ExitCode:
    """Show a closure, minimal cover, and candidate keys for a
    built-in example.
    """
    dependencies = DependencySet.from_simple_form(DEMO_DEPENDENCIES)
    attributes = AttributeSet.from_simple_form(DEMO_ATTRIBUTES)
    keys = dependencies.candidate_keys()

    # Define short alias for style values (used in f-string).
    bright = args.stdout_style.bright
    reset = args.stdout_style.reset

    keys_str = '\n  '.join(f'{{{key}}}' for key in keys)
    sys.stdout.write(
        f"{bright}dependencies:{reset} {dependencies}\n"
        f"{bright}attributes:{reset} {{{attributes}}}\n"
        f"{bright}closure:{reset} {{{attributes.closure(dependencies)}}}\n"
        f"{bright}minimal cover:{reset} {dependencies.minimal_cover()}\n"
        f"{bright}candidate keys:{reset}\n"
        f"  {keys_str}\n"
    )
    return ExitCode.OK
