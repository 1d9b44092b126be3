#!/usr/bin/env python3
"""
Filesystems Demo: read → query → edit → write a copy

Shows the full workflow on an AIX-style /etc/filesystems:
1. Load (or create) the stanza file
2. Query an attribute
3. Change it
4. Analyze the document
5. Write the result to a new file
"""

import sys

from stanzafile import StanzaDocument
from stanzafile.analyzer import analyze_document
from stanzafile.examples import build_example_filesystems


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "filesystems"

    print("=" * 80)
    print("STANZA FILE DEMO: read → query → edit → write")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Load
    # =========================================================================
    print(f"\n1. READING {path}...")
    doc = StanzaDocument(path)
    if not doc.stanzas:
        print("   (empty file, using the example /etc/filesystems)")
        doc.parse(build_example_filesystems().format())
    print(f"   ✓ Stanzas: {len(doc)}")
    print(doc)

    # =========================================================================
    # STEP 2: Query
    # =========================================================================
    print("\n2. QUERYING /nim/spot...")
    print(f"   dev = {doc.get_stanza_attr('/nim/spot', 'dev')}")

    # =========================================================================
    # STEP 3: Edit
    # =========================================================================
    print("\n3. SETTING dev = /dev/lvspot...")
    doc.set_stanza_attr("/nim/spot", "dev", "/dev/lvspot")
    print(f"   dev = {doc.get_stanza_attr('/nim/spot', 'dev')}")

    # =========================================================================
    # STEP 4: Analyze
    # =========================================================================
    print("\n4. ANALYZING...")
    report = analyze_document(doc)
    print(f"   ✓ Attributes: {report.total_attributes}")
    for warning in report.warnings:
        print(f"      - {warning}")

    # =========================================================================
    # STEP 5: Write
    # =========================================================================
    out_path = f"{path}.new"
    doc.write_to_file(out_path)
    print(f"\n5. ✓ Saved {out_path}")
    print("=" * 80)


if __name__ == "__main__":
    main()
