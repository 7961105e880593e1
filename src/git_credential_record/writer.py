"""Writing credential records in the git credential line format."""

from __future__ import annotations
import io
from typing import BinaryIO

from .record import CredentialRecord


def write_credential(record: CredentialRecord, sink: BinaryIO) -> None:
    """Write one ``key=value`` line per present field.

    Fields go out in the order protocol, host, path, username, password.
    Values are written as-is, so they must not contain ``\\n``. No blank
    terminator line is written; that is up to the caller.
    """
    for name, value in record.items():
        sink.write(f"{name}={value}\n".encode("utf-8"))


def render_credential(record: CredentialRecord) -> bytes:
    """Return the line form of ``record`` as bytes."""
    buf = io.BytesIO()
    write_credential(record, buf)
    return buf.getvalue()
