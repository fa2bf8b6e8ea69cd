"""Entry point for embedding fundeps in a host application."""

from ._typing import Optional
from ._utils import ParseError
from .dependencies import DependencySet


def candidate_keys_text(string: str) -> Optional[str]:
    """Return the candidate keys of the dependency set given as text,
    one key per line, or None if the text cannot be parsed.

    .. code-block::

        >>> print(candidate_keys_text('A -> B\\nB -> C'))
        A
        >>> candidate_keys_text('A, B') is None
        True
    """
    try:
        dependencies = DependencySet.from_string(string)
    except ParseError:
        return None

    keys = dependencies.candidate_keys(dependencies.effective_attributes())
    return '\n'.join(str(key) for key in keys)
