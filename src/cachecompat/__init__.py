"""cachecompat - input contract for cross-implementation token cache tests.

A test input names the scope to request, the cache artifact to read or
write, where to record results, and the lab accounts to sign in as.
"""

from cachecompat.config import LoaderOptions
from cachecompat.exceptions import (
    InputFileError,
    MalformedInputError,
    MissingFieldError,
    TestInputError,
    TypeMismatchError,
)
from cachecompat.loader import dump, load, load_file
from cachecompat.models import AccountDescriptor, TestInputDescriptor

__version__ = "0.1.0"

__all__ = [
    "AccountDescriptor",
    "InputFileError",
    "LoaderOptions",
    "MalformedInputError",
    "MissingFieldError",
    "TestInputDescriptor",
    "TestInputError",
    "TypeMismatchError",
    "__version__",
    "dump",
    "load",
    "load_file",
]
