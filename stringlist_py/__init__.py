"""StringList-Py – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    FilenamePolicy,
    PreconditionError,
    StringList,
    combine,
    delete,
    new,
)

try:
    __version__ = metadata.version("stringlist-py")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
