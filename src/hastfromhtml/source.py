"""Source files handed to the parser.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, replace

__all__ = ["SourceFile"]


@dataclass(frozen=True, slots=True)
class SourceFile:
    """HTML text plus the path it came from, if any.

    The path is the subject name used to prefix diagnostic names and is
    copied to each diagnostic's ``file`` field.

    Attributes:
        value: Document text
        path: File path, or None for anonymous input

    Example:
        >>> file = SourceFile("</x/>", path="docs/example.html")
        >>> file.basename
        'example.html'
        >>> file.with_dirname("").path
        'example.html'
    """

    value: str
    path: str | None = None

    def __str__(self) -> str:
        return self.value

    @property
    def dirname(self) -> str | None:
        """Directory part of the path, None without a path."""
        if self.path is None:
            return None
        return posixpath.dirname(self.path)

    @property
    def basename(self) -> str | None:
        """Final component of the path, None without a path."""
        if self.path is None:
            return None
        return posixpath.basename(self.path)

    def with_dirname(self, dirname: str) -> SourceFile:
        """Return a copy whose path lives in ``dirname``.

        Raises:
            ValueError: If the file has no path to move.
        """
        if self.path is None:
            msg = "Cannot set dirname on a file without a path"
            raise ValueError(msg)
        return replace(self, path=posixpath.join(dirname, posixpath.basename(self.path)))

    @classmethod
    def coerce(cls, value: str | SourceFile) -> SourceFile:
        """Wrap plain text in a SourceFile; pass SourceFile through."""
        if isinstance(value, SourceFile):
            return value
        return cls(value)
