"""
Core Stanza Model Object

Defines the data structure for one paragraph of a stanza file.

A basic stanza from AIX /etc/filesystems:

    /home:
           dev = /dev/hd1
           mount = true
           vfs = jfs2

"/home" is the name of the stanza. In the file the name always ends with
':', in memory it never does.

"dev", "mount" and "vfs" are the stanza's attributes. Their values are
written after the equal sign.

Every stanza can carry comment lines. In the file each comment line starts
with the comment character in the first column, usually an asterisk.

ARCHITECTURAL RULE:
    Stanza objects know nothing about files or parsing.
    They are owned by exactly one StanzaDocument; data moves between
    stanzas by copying, never by sharing.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


DEFAULT_COMMENT_CHAR = "*"

# Attribute lines are written with this fixed indentation
ATTRIBUTE_INDENT = " " * 7


@dataclass
class Stanza:
    """
    One named block of attributes plus its comment.

    Properties:
        name:
            Stanza identifier (e.g. "/home", "default")
            A trailing ':' given at construction is stripped.

        attributes:
            Ordered mapping of attribute name to value.
            Order is preserved so output matches the source order.

        comment:
            Comment lines appearing before the stanza, stored without
            the comment-character prefix.

        comment_char:
            Character used when the stanza is formatted on its own.
            A StanzaDocument passes its own character explicitly.
    """

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    comment: List[str] = field(default_factory=list)
    comment_char: str = DEFAULT_COMMENT_CHAR

    def __post_init__(self) -> None:
        if self.name.endswith(":"):
            self.name = self.name[:-1]
        # the stanza owns its data
        self.attributes = dict(self.attributes or {})
        self.comment = list(self.comment or [])

    def copy(self, other: "Stanza") -> None:
        """
        Copy attributes, comment and comment character of another stanza.

        All attributes of this stanza are thrown away first.
        The name is kept.

        Example:
            a = Stanza("/home", {"vfs": "jfs2", "dev": "/dev/hd1"})
            b = Stanza("/usr", {"vfs": "jfs2", "dev": "/dev/hd2"})
            a.copy(b)   # a.name == "/home", a.attributes == b.attributes
        """
        # snapshot first, `other` may be this stanza
        attributes = dict(other.attributes)
        comment = list(other.comment)
        self.attributes.clear()
        self.attributes.update(attributes)
        self.comment = comment
        self.comment_char = other.comment_char

    def add_comment(self, line: str) -> None:
        """Append a comment line (several if the text contains newlines)."""
        self.comment.extend(line.splitlines() or [""])

    def clear_comment(self) -> None:
        self.comment = []

    def set_attribute(self, key: str, value: str) -> None:
        """
        Add or update an attribute.

        An existing key keeps its position; a new key is appended.
        """
        self.attributes[key] = value

    def delete_attribute(self, key: str) -> None:
        self.attributes.pop(key, None)

    def get_attribute(self, key: str) -> Optional[str]:
        """
        Retrieve an attribute value.

        Args:
            key: Attribute name

        Returns:
            The value (possibly an empty string) or None if not defined
        """
        return self.attributes.get(key)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def attribute_names(self) -> List[str]:
        return list(self.attributes.keys())

    def attribute_values(self) -> List[str]:
        return list(self.attributes.values())

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over (name, value) pairs in stored order."""
        return iter(self.attributes.items())

    def merge(self, other: "Stanza") -> None:
        """
        Merge another stanza into this one.

        Values of `other` win on key collision; keys new to this stanza
        are appended in `other`'s order. Comments are concatenated.

        Example:
            s1 = Stanza("stanza1", {"attr1": "value1", "attr2": "value2"})
            s2 = Stanza("stanza2", {"attr3": "value3", "attr2": "value4"})
            s1.merge(s2)
            # s1.attributes == {"attr1": "value1", "attr2": "value4",
            #                   "attr3": "value3"}
        """
        self.attributes.update(other.attributes)
        self.comment.extend(other.comment)

    def is_empty(self) -> bool:
        """True if the stanza has no attributes (name and comment ignored)."""
        return not self.attributes

    def clear(self) -> None:
        """Remove all attributes, the name and the comment."""
        self.attributes.clear()
        self.name = ""
        self.comment = []

    def format(self, comment_char: Optional[str] = None) -> str:
        """
        Create the textual representation of the stanza.

        Output:
            * comment line
            stanza1:
                   attr1 = value1
                   attr2 = value2
        """
        cc = self.comment_char if comment_char is None else comment_char
        lines = [f"{cc} {line}" for line in self.comment]
        lines.append(f"{self.name}:")
        for key, value in self.attributes.items():
            value = value.rstrip("\n")
            lines.append(f"{ATTRIBUTE_INDENT}{key} = {value}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format()
