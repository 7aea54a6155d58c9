"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .errors import PreconditionError
from .filename_policy import FilenamePolicy
from .string_list import StringList, combine, delete, new

__all__ = [
    "StringList",
    "FilenamePolicy",
    "PreconditionError",
    "new",
    "combine",
    "delete",
]
