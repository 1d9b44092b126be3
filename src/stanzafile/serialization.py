"""
Serialization helpers for stanza objects (Stanza, StanzaDocument).

Provides JSON/YAML export and import via an intermediate dict representation.
This module intentionally keeps the serialization structure stable and explicit.
Attribute order is part of the data and is preserved in both formats.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from stanzafile.document import StanzaDocument
from stanzafile.model import DEFAULT_COMMENT_CHAR, Stanza


def stanza_to_dict(s: Stanza) -> Dict[str, Any]:
    return {
        "name": s.name,
        "comment": list(s.comment),
        "attributes": dict(s.attributes),
    }


def stanza_from_dict(d: Dict[str, Any]) -> Stanza:
    return Stanza(
        name=d["name"],
        attributes={str(k): str(v) for k, v in (d.get("attributes") or {}).items()},
        comment=list(d.get("comment") or []),
    )


def document_to_dict(doc: StanzaDocument) -> Dict[str, Any]:
    return {
        "comment_char": doc.comment_char,
        "comment": list(doc.document_comment),
        "stanzas": [stanza_to_dict(s) for s in doc.stanzas],
    }


def document_from_dict(d: Dict[str, Any]) -> StanzaDocument:
    """
    Build an in-memory document (no source path) from its dict form.

    Stanzas are appended directly, so repeated names survive the trip.
    """
    doc = StanzaDocument(comment_char=d.get("comment_char", DEFAULT_COMMENT_CHAR))
    doc.document_comment = list(d.get("comment") or [])
    doc.stanzas = [stanza_from_dict(s) for s in d.get("stanzas", [])]
    for stanza in doc.stanzas:
        stanza.comment_char = doc.comment_char
    return doc


def document_to_json(doc: StanzaDocument) -> str:
    # keys inside "attributes" keep their order, only the envelope is fixed
    return json.dumps(document_to_dict(doc), indent=2)


def document_from_json(s: str) -> StanzaDocument:
    d = json.loads(s)
    return document_from_dict(d)


def document_to_yaml(doc: StanzaDocument) -> str:
    return yaml.safe_dump(document_to_dict(doc), sort_keys=False)


def document_from_yaml(s: str) -> StanzaDocument:
    d = yaml.safe_load(s)
    return document_from_dict(d)
