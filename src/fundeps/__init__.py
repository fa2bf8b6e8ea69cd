"""Closures, minimal covers, and candidate keys for functional dependencies."""

__all__ = [
    # CLASSES
    'Attribute',
    'AttributeSet',
    'Dependency',
    'DependencySet',
    'FundepsError',
    'ParseError',
    'TooManyKeysError',

    # FUNCTIONS
    'candidate_keys_text',
]
__version__ = '0.1.0'

def __dir__():  # Customize module attribute list (PEP 562).
    special_attrs = [x for x in globals().keys() if x.startswith('__')]
    return __all__ + special_attrs

from .attributes import (
    Attribute,
    AttributeSet,
)
from .dependencies import (
    Dependency,
    DependencySet,
)
from .embed import candidate_keys_text
from ._utils import (
    FundepsError,
    ParseError,
    TooManyKeysError,
)

# Set class modules to 'fundeps' to keep interface tidy.
Attribute.__module__ = 'fundeps'
AttributeSet.__module__ = 'fundeps'
Dependency.__module__ = 'fundeps'
DependencySet.__module__ = 'fundeps'
FundepsError.__module__ = 'fundeps'
ParseError.__module__ = 'fundeps'
TooManyKeysError.__module__ = 'fundeps'

# Define 'app-fundeps' logger and set level to INFO (20) but leave
# the handler unspecified--defaults to "handler of last resort".
#
# This logger will receive messages intended for an application
# enduser. The application should add its own handler to display
# these messages in a context-appropriate format.
__import__('logging').getLogger(f'app-{__name__}').setLevel(level=20)
