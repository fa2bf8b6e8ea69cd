"""compatibility layer for `typing` (Python standard library)

Names that fundeps uses but which are missing from the `typing` module
of older interpreters are imported from `typing_extensions`.
"""
import sys
from typing import *
from typing import TextIO  # Not included in `__all__` before Python 3.9.


if sys.version_info < (3, 11):
    from typing_extensions import Self
