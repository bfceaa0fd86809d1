"""fieldsafe: declarative validation for flat, named field values."""

__version__ = "0.1.0"

from fieldsafe.validation import *  # noqa: E402,F401,F403
from fieldsafe.validation import __all__  # noqa: E402,F401
