"""Common functions and classes for test cases."""
__unittest = True

import io
import os
import tempfile
import unittest
from contextlib import (
    closing,
    redirect_stdout,
    redirect_stderr,
)
from itertools import combinations
from typing import Iterable, Iterator, List

from fundeps import AttributeSet, Dependency, DependencySet


def iter_subsets(attributes: Iterable) -> Iterator[AttributeSet]:
    """Generate every subset of *attributes*, smallest first."""
    attributes = list(AttributeSet(attributes))
    for length in range(len(attributes) + 1):
        for subsequence in combinations(attributes, length):
            yield AttributeSet(subsequence)


def brute_force_keys(
    dependencies: DependencySet, universe: AttributeSet
) -> List[AttributeSet]:
    """Return candidate keys found by checking every subset of
    *universe*, in order of increasing size.
    """
    keys: List[AttributeSet] = []
    for subset in iter_subsets(universe):
        if any(key <= subset for key in keys):
            continue  # Not minimal, contains a smaller key.
        if subset.closure(dependencies) >= universe:
            keys.append(subset)
    return keys


def closures_match(
    first: DependencySet, second: DependencySet, universe: AttributeSet
) -> bool:
    """Return True if every subset of *universe* has the same closure
    under *first* and *second*.
    """
    return all(
        subset.closure(first) == subset.closure(second)
        for subset in iter_subsets(universe)
    )


def remove_dependency(
    dependencies: DependencySet, dependency: Dependency
) -> DependencySet:
    """Return a copy of *dependencies* without *dependency*."""
    reduced = dependencies.copy()
    reduced.discard(dependency)
    return reduced


def replace_dependency(
    dependencies: DependencySet, old: Dependency, new: Dependency
) -> DependencySet:
    """Return a copy of *dependencies* with *old* replaced by *new*."""
    reduced = remove_dependency(dependencies, old)
    reduced.add(new)
    return reduced


class StreamWrapperTestCase(unittest.TestCase):
    def setUp(self):
        stdout_cm = redirect_stdout(io.StringIO())
        self.stdout_capture = stdout_cm.__enter__()
        self.addCleanup(lambda: stdout_cm.__exit__(None, None, None))

        stderr_cm = redirect_stderr(io.StringIO())
        self.stderr_capture = stderr_cm.__enter__()
        self.addCleanup(lambda: stderr_cm.__exit__(None, None, None))

    def get_tempfile_path(self, contents=None):
        """Helper function to get a path to a temporary file,
        optionally written with the given *contents*.
        """
        with closing(tempfile.NamedTemporaryFile(
            mode='w', encoding='utf-8', suffix='.txt', delete=False
        )) as tmp:
            if contents is not None:
                tmp.write(contents)
            self.addCleanup(lambda: os.remove(tmp.name))
        return tmp.name


class DummyTTY(io.StringIO):
    """StringIO that mimics an interactive stream (a TTY)."""
    def isatty(self):
        return True


class DummyStream(io.TextIOWrapper):
    """TextIOWrapper that mimics an interactive stream (a TTY)."""
    def __init__(self):
        super().__init__(io.BytesIO())

    def isatty(self):
        return True


class DummyRedirectedStream(io.TextIOWrapper):
    """TextIOWrapper to mimic a stream being redirected or piped."""
    def __init__(self):
        super().__init__(io.BytesIO())

    def isatty(self):
        return False
