"""
Stanza file parser (raw text -> Stanza objects).

Single pass over the input, one line at a time, no lookahead.

Line classes, checked in this order:
    comment     first character is the comment character
    header      line ends with ':'         ("/home:")
    blank       nothing left after trimming
    attribute   anything else inside a stanza ("dev = /dev/hd1")

A blank line closes the open stanza. Before the first header, every comment
block ended by a blank line is document comment. Comment lines directly above
a header belong to that stanza.

Parsing is lenient: attribute lines without '=' or with an empty key or
value are dropped and reported in ParseResult.dropped_lines, never raised.
"""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from stanzafile.model import DEFAULT_COMMENT_CHAR, Stanza


class ParserState(Enum):
    """Where the parser is relative to stanza boundaries."""
    NO_STANZA = "no_stanza"              # document preamble
    IN_STANZA = "in_stanza"              # header seen, collecting attributes
    BETWEEN_STANZAS = "between_stanzas"  # stanza closed, none open


@dataclass
class DroppedLine:
    """A source line the parser ignored."""
    line_number: int
    text: str
    reason: str


@dataclass
class ParseResult:
    """Everything recovered from one stanza file."""
    document_comment: List[str] = field(default_factory=list)
    stanzas: List[Stanza] = field(default_factory=list)
    dropped_lines: List[DroppedLine] = field(default_factory=list)


def split_attribute_line(line: str) -> Optional[tuple]:
    """
    Split "key = value" on the first '='.

    Returns:
        (key, value) with surrounding whitespace removed, or None if the
        line has no '=' or the key or value is empty
    """
    key, sep, value = line.partition("=")
    key = key.strip()
    value = value.strip()
    if not sep or not key or not value:
        return None
    return key, value


class _StanzaParser:
    """Parser state for one input."""

    def __init__(self, comment_char: str):
        self.comment_char = comment_char
        self.result = ParseResult()
        self.state = ParserState.NO_STANZA
        self.current_name = ""
        self.buffered_lines: List[tuple] = []
        # comments for the open (or next) stanza
        self.pending_comment: List[tuple] = []
        # comments seen since the last attribute line of the open stanza
        self.trailing_comment: List[tuple] = []

    def feed(self, line_number: int, raw: str) -> None:
        line = raw.rstrip()

        if line.startswith(self.comment_char):
            text = line[len(self.comment_char):].strip()
            if self.state is ParserState.IN_STANZA:
                self.trailing_comment.append((line_number, text))
            else:
                self.pending_comment.append((line_number, text))
            return

        if line.endswith(":"):
            # comments right above the header belong to the new stanza
            following = self.trailing_comment
            self.trailing_comment = []
            self._close_stanza()
            self.pending_comment.extend(following)
            name = line[:-1].strip()
            if not name:
                self._drop(line_number, raw, "empty stanza name")
                self.state = ParserState.BETWEEN_STANZAS
                return
            self.current_name = name
            self.state = ParserState.IN_STANZA
            return

        if not line.strip():
            if self.state is ParserState.IN_STANZA:
                self._close_stanza()
            elif self.state is ParserState.NO_STANZA:
                self._flush_document_comment()
            return

        if self.state is ParserState.IN_STANZA:
            self.pending_comment.extend(self.trailing_comment)
            self.trailing_comment = []
            self.buffered_lines.append((line_number, line))
        else:
            self._drop(line_number, raw, "attribute outside of a stanza")

    def finish(self) -> ParseResult:
        if self.state is ParserState.IN_STANZA:
            warnings.warn(
                f"stanza '{self.current_name}' not terminated by a blank line",
                UserWarning,
            )
            self._close_stanza()
        elif self.state is ParserState.NO_STANZA:
            self._flush_document_comment()
        for line_number, text in self.pending_comment:
            self._drop(line_number, text, "comment not followed by a stanza")
        return self.result

    def _flush_document_comment(self) -> None:
        """A comment block ended by a blank line before any header is document comment."""
        self.result.document_comment.extend(text for _, text in self.pending_comment)
        self.pending_comment = []

    def _close_stanza(self) -> None:
        if self.state is not ParserState.IN_STANZA:
            return
        stanza = Stanza(self.current_name, comment_char=self.comment_char)
        for line_number, line in self.buffered_lines:
            pair = split_attribute_line(line)
            if pair is None:
                self._drop(line_number, line, "not a key = value pair")
                continue
            stanza.set_attribute(*pair)
        stanza.comment = [text for _, text in self.pending_comment + self.trailing_comment]
        self.result.stanzas.append(stanza)

        self.state = ParserState.BETWEEN_STANZAS
        self.current_name = ""
        self.buffered_lines = []
        self.pending_comment = []
        self.trailing_comment = []

    def _drop(self, line_number: int, text: str, reason: str) -> None:
        self.result.dropped_lines.append(DroppedLine(line_number, text.rstrip("\r\n"), reason))


def parse_stanza_lines(lines: Iterable[str], comment_char: str = DEFAULT_COMMENT_CHAR) -> ParseResult:
    """
    Parse an iterable of lines into a ParseResult.

    Args:
        lines: Source lines, with or without line terminators
        comment_char: Character marking comment lines

    Returns:
        ParseResult with document comment, stanzas and dropped lines
    """
    if len(comment_char) != 1:
        raise ValueError(f"comment_char must be a single character, got {comment_char!r}")

    parser = _StanzaParser(comment_char)
    for line_number, line in enumerate(lines, start=1):
        parser.feed(line_number, line)
    return parser.finish()


def parse_stanza_string(text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> ParseResult:
    """
    Parse the full text of a stanza file.

    Line endings are normalized to '\\n' before parsing.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")
    # the final element after a terminating '\n' is not a line
    if lines and lines[-1] == "":
        lines.pop()
    return parse_stanza_lines(lines, comment_char=comment_char)


__all__ = [
    "ParserState",
    "DroppedLine",
    "ParseResult",
    "parse_stanza_lines",
    "parse_stanza_string",
    "split_attribute_line",
]
