"""Utility functions and classes for the fundeps project.

This sub-module contains code that is used elsewhere in fundeps to
split text, check argument types, and raise exceptions.

NOTE: This module should not import code from within fundeps itself.
The `_typing` compatibility module is treated as if it were part of
the Standard Library and may be imported.
"""

import re
from ._typing import (
    Any,
    Iterator,
    List,
    Type,
    TypeVar,
)


T = TypeVar('T')


class FundepsError(Exception):
    """Error in fundeps usage or invocation."""


class ParseError(FundepsError, ValueError):
    """Text could not be parsed as an attribute set, a dependency,
    or a dependency set.
    """


class TooManyKeysError(FundepsError):
    """Candidate key enumeration exceeded the requested limit."""


def check_type(obj: Any, required_type: Type[T]) -> T:
    """Check that *obj* is instance of *required_type* and return value
    unchanged or else raise a TypeError.
    """
    if isinstance(obj, required_type):
        return obj  # <- EXIT, return unchanged.
    msg = f'required type {required_type}, but got {obj.__class__}'
    raise TypeError(msg)


ARROW = '->'


def split_names(string: str) -> List[str]:
    """Split a comma-separated list of names, stripping whitespace
    from each item. Empty or whitespace-only text gives an empty list.

    .. code-block::

        >>> split_names(' A, B ,C ')
        ['A', 'B', 'C']
        >>> split_names('   ')
        []

    A ParseError is raised when an item between commas is empty::

        >>> split_names('A,,B')
        Traceback (most recent call last):
          ...
        ParseError: empty attribute name in 'A,,B'
    """
    if not string.strip():
        return []  # <- EXIT!

    names = [item.strip() for item in string.split(',')]
    if not all(names):
        raise ParseError(f'empty attribute name in {string!r}')
    return names


def split_arrow(string: str) -> List[str]:
    """Split dependency text on its ``->`` separator and return the
    left and right hand text. A ParseError is raised unless the text
    contains exactly one separator.

    .. code-block::

        >>> split_arrow('A, B -> C')
        ['A, B ', ' C']
    """
    parts = string.strip().split(ARROW)
    if len(parts) != 2:
        if len(parts) == 1:
            msg = f'missing {ARROW!r} separator: {string!r}'
        else:
            msg = f'more than one {ARROW!r} separator: {string!r}'
        raise ParseError(msg)
    return parts


def iter_content_lines(text: str) -> Iterator[str]:
    """Yield stripped lines from *text*, skipping blank and
    whitespace-only lines.
    """
    for line in re.split(r'\r\n|\r|\n', text):
        line = line.strip()
        if line:
            yield line
