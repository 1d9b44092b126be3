"""
File access for stanza documents.

The parser and formatter never touch the filesystem themselves; a
StanzaDocument goes through a FileStore for every read and write.
Any OS-level failure surfaces as StanzaIOError.
"""

import os


class StanzaError(Exception):
    """Base class for stanza file errors."""
    pass


class StanzaIOError(StanzaError):
    """Raised when a stanza file cannot be read or written."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class FileStore:
    """
    Whole-file text access on the local filesystem.

    Every operation reads or writes a complete file. There is no locking
    and no atomic replace.
    """

    encoding = "utf-8"

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read_all(self, path: str) -> str:
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StanzaIOError(path, f"cannot read: {e}") from e

    def write_all(self, path: str, text: str) -> None:
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(text)
        except OSError as e:
            raise StanzaIOError(path, f"cannot write: {e}") from e

    def create_empty(self, path: str) -> None:
        """Create `path` if missing; an existing file is left untouched."""
        try:
            fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o644)
        except OSError as e:
            raise StanzaIOError(path, f"cannot create: {e}") from e
        os.close(fd)


__all__ = ["FileStore", "StanzaError", "StanzaIOError"]
