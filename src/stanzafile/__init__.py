"""
Stanza File Package

Reads, edits and writes "stanza files": the line-oriented configuration
format of AIX files such as /etc/filesystems or /etc/security/login.cfg.

    * comment

    /home:
           dev = /dev/hd1
           vfs = jfs2

ARCHITECTURAL GUARANTEE:
------------------------
Parsing and formatting are pure in-memory transformations.
Only StanzaDocument.read*/write* touch the filesystem, through a FileStore.
"""

from stanzafile.io import FileStore, StanzaError, StanzaIOError
from stanzafile.model import Stanza
from stanzafile.document import DuplicateStanzaError, StanzaDocument

__version__ = "0.1.0"

__all__ = [
    "Stanza",
    "StanzaDocument",
    "FileStore",
    "StanzaError",
    "StanzaIOError",
    "DuplicateStanzaError",
]
