"""
StanzaDocument: a whole stanza file in memory.

Represents a file with one or many stanzas, e.g. /etc/filesystems or
/etc/security/login.cfg. The file usually begins with comments describing
the file and the possible stanzas, followed by the stanzas themselves.
Each stanza can carry its own comment.

Nothing is written to disk until write() or write_to_file() is called.

Example:
    doc = StanzaDocument("/etc/filesystems")
    doc.get_stanza_attr("/home", "dev")             # "/dev/hd1"
    doc.set_stanza_attr("/home", "log", "INLINE")
    doc.write_to_file("/etc/filesystems.new")

Duplicate stanza names:
    Files edited by hand may repeat a stanza name, and parsing keeps every
    copy. Lookups (get_stanza, get_stanza_attr) return the first match;
    updates (set_stanza, set_stanza_attr, delete_stanza_attr, delete_stanza)
    apply to every match. add_stanza refuses a name that is already present.
"""

from typing import Iterator, List, Optional

from stanzafile.io import FileStore, StanzaError
from stanzafile.model import DEFAULT_COMMENT_CHAR, Stanza
from stanzafile.parser import DroppedLine, parse_stanza_string


class DuplicateStanzaError(StanzaError):
    """Raised when adding a stanza whose name is already in the document."""
    pass


class StanzaDocument:
    """
    Ordered collection of stanzas plus a document comment.

    Properties:
        source_path:
            File the document was loaded from; read() and write() use it.

        comment_char:
            Character marking comment lines when parsing and formatting.

        document_comment:
            Comment lines preceding the first stanza.

        stanzas:
            Stanza objects in file order.

        dropped_lines:
            Lines the last parse ignored (malformed attributes etc.).
    """

    def __init__(
        self,
        source_path: Optional[str] = None,
        comment_char: str = DEFAULT_COMMENT_CHAR,
        store: Optional[FileStore] = None,
    ):
        """
        Create a document.

        If `source_path` exists its contents are parsed immediately.
        If it does not exist, an empty file is created there.
        """
        if len(comment_char) != 1:
            raise ValueError(f"comment_char must be a single character, got {comment_char!r}")
        self.source_path = source_path
        self.comment_char = comment_char
        self.store = store if store is not None else FileStore()
        self.document_comment: List[str] = []
        self.stanzas: List[Stanza] = []
        self.dropped_lines: List[DroppedLine] = []

        if source_path is not None:
            if self.store.exists(source_path):
                self._read_file(source_path)
            else:
                self.store.create_empty(source_path)

    @classmethod
    def from_string(cls, text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> "StanzaDocument":
        doc = cls(comment_char=comment_char)
        doc.parse(text)
        return doc

    # -------------------------------------------------------------------------
    # Reading and writing
    # -------------------------------------------------------------------------

    def parse(self, text: str) -> None:
        """Replace the document contents with the stanzas parsed from `text`."""
        self.clear()
        result = parse_stanza_string(text, comment_char=self.comment_char)
        self.document_comment = result.document_comment
        self.stanzas = result.stanzas
        self.dropped_lines = result.dropped_lines

    def read(self) -> None:
        """
        Throw away all changes and re-read the document from source_path.

        Raises:
            StanzaError: If the document has no source path
            StanzaIOError: If the file cannot be read
        """
        self._read_file(self._require_source_path())

    def read_from_file(self, path: str) -> None:
        """
        Replace the document contents with the stanzas of another file.

        source_path is not changed, so a later write() still goes to the
        original file.
        """
        self._read_file(path)

    def write(self) -> None:
        """Write the document back to source_path."""
        self.write_to_file(self._require_source_path())

    def write_to_file(self, path: str) -> None:
        """Write the document to `path`, e.g. to keep a backup copy."""
        self.store.write_all(path, self.format())

    def _read_file(self, path: str) -> None:
        # in-memory state is discarded even if the read fails
        self.clear()
        self.parse(self.store.read_all(path))

    def _require_source_path(self) -> str:
        if self.source_path is None:
            raise StanzaError("document has no source path")
        return self.source_path

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def clear(self) -> None:
        """Remove all stanzas and the document comment."""
        self.document_comment = []
        self.stanzas = []
        self.dropped_lines = []

    def add_comment(self, line: str) -> None:
        self.document_comment.extend(line.splitlines() or [""])

    def add_stanza(self, stanza: Stanza) -> None:
        """
        Append a copy of a stanza at the end of the document.

        The document owns the stored copy; later changes to `stanza`
        do not reach the document, and vice versa.

        Raises:
            DuplicateStanzaError: If a stanza with the same name exists
            ValueError: If the stanza has no name
        """
        if not stanza.name:
            raise ValueError("stanza name must not be empty")
        if self.has_stanza(stanza.name):
            raise DuplicateStanzaError(f"stanza '{stanza.name}' already exists")
        owned = Stanza(stanza.name)
        owned.copy(stanza)
        self.stanzas.append(owned)

    def set_stanza(self, name: str, replacement: Stanza) -> None:
        """Copy `replacement` into every stanza called `name`, in place."""
        for stanza in self._matching(name):
            stanza.copy(replacement)

    def delete_stanza(self, name: str) -> None:
        self.stanzas = [s for s in self.stanzas if s.name != name]

    def set_stanza_attr(self, name: str, key: str, value: str) -> None:
        for stanza in self._matching(name):
            stanza.set_attribute(key, value)

    def delete_stanza_attr(self, name: str, key: str) -> None:
        for stanza in self._matching(name):
            stanza.delete_attribute(key)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_stanza(self, name: str) -> Optional[Stanza]:
        """
        Retrieve a stanza by name.

        Returns:
            The first stanza called `name`, or None if not found
        """
        for stanza in self.stanzas:
            if stanza.name == name:
                return stanza
        return None

    def get_stanza_attr(self, name: str, key: str) -> Optional[str]:
        """
        Retrieve an attribute of a stanza.

        Returns:
            The value from the first stanza called `name`, or None if the
            stanza or the attribute does not exist
        """
        stanza = self.get_stanza(name)
        if stanza is None:
            return None
        return stanza.get_attribute(key)

    def has_stanza(self, name: str) -> bool:
        return self.get_stanza(name) is not None

    def stanza_names(self) -> List[str]:
        return [s.name for s in self.stanzas]

    def _matching(self, name: str) -> List[Stanza]:
        return [s for s in self.stanzas if s.name == name]

    def __len__(self) -> int:
        return len(self.stanzas)

    def __iter__(self) -> Iterator[Stanza]:
        return iter(self.stanzas)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_stanza(name)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """
        Create the textual representation of the whole file.

        Layout:
            <document comment lines>
            <blank line>
            <stanza block>
            <blank line>
            ...
        """
        cc = self.comment_char
        parts = [f"{cc} {line}\n" for line in self.document_comment]
        parts.append("\n")
        for stanza in self.stanzas:
            parts.append(stanza.format(cc))
            parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"StanzaDocument(source_path={self.source_path!r}, "
            f"stanzas={self.stanza_names()!r})"
        )


__all__ = ["StanzaDocument", "DuplicateStanzaError"]
