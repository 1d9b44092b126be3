"""
Example document builder based on a stock AIX /etc/filesystems.

Builds the usual rootvg file systems plus a NIM SPOT file system,
each with its typical attributes.
"""
from stanzafile.document import StanzaDocument
from stanzafile.model import Stanza


def build_example_filesystems(spot_dev: str = "/dev/lv00") -> StanzaDocument:
    doc = StanzaDocument()
    doc.add_comment("@(#)filesystems @(#)29 1.22 src/bos/etc/filesystems/filesystems, cmdfs, bos720")
    doc.add_comment("")
    doc.add_comment("This version of /etc/filesystems assumes that only the root file system")
    doc.add_comment("is created and ready.")

    rootvg = [
        ("/", "/dev/hd4", "root", "automatic", "true"),
        ("/home", "/dev/hd1", "/home", "true", "true"),
        ("/usr", "/dev/hd2", "/usr", "automatic", "false"),
        ("/var", "/dev/hd9var", "/var", "automatic", "false"),
        ("/tmp", "/dev/hd3", "/tmp", "automatic", "false"),
    ]
    for mount_point, dev, label, mount, check in rootvg:
        doc.add_stanza(Stanza(mount_point, {
            "dev": dev,
            "vfs": "jfs2",
            "log": "/dev/hd8",
            "mount": mount,
            "check": check,
            "type": "bootfs",
            "vol": label,
            "free": "false",
        }))

    spot = Stanza("/nim/spot", {
        "dev": spot_dev,
        "vfs": "jfs2",
        "log": "INLINE",
        "mount": "true",
        "account": "false",
    })
    spot.add_comment("NIM SPOT resource")
    doc.add_stanza(spot)

    return doc
