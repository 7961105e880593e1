"""Reading credential records from the git credential line format.

Input is a sequence of ``key=value`` lines terminated by ``\\n``. A blank
line (or end of input) ends the record. Unknown keys are skipped so newer
git versions can send attributes this package does not know about.
"""

from __future__ import annotations
import io
import logging
from typing import BinaryIO, Optional, Union

from .errors import InvalidLineError, LineTooLongError, ReadError
from .record import FIELDS, CredentialRecord

logger = logging.getLogger(__name__)

# Longest accepted line, terminator excluded.
MAX_LINE_LENGTH = 65535 - 1


def _read_line(stream: BinaryIO) -> Optional[bytes]:
    """Return the next line without its terminator, or None at end of input.

    At most MAX_LINE_LENGTH + 2 bytes are read, enough for a full-length
    line followed by ``\\r\\n``.
    """
    try:
        raw = stream.readline(MAX_LINE_LENGTH + 2)
    except OSError as ex:
        raise ReadError() from ex
    if not raw:
        return None
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def read_credential(stream: BinaryIO, *, url_support: bool = True) -> CredentialRecord:
    """Read one credential record from a binary stream.

    With ``url_support`` a ``url=`` line is decomposed into the record's
    fields; without it ``url`` is ignored like any unknown key.

    Raises:
        ReadError: the stream failed or a line is not valid UTF-8.
        LineTooLongError: a line exceeds MAX_LINE_LENGTH bytes.
        InvalidLineError: a non-empty line has no ``=``.
        InvalidUrlError: a ``url`` value is not an absolute URL.
    """
    record = CredentialRecord()
    while True:
        raw = _read_line(stream)
        if raw is None:
            logger.debug("end of input before blank line")
            break
        if not raw:
            logger.debug("blank line, record complete")
            break
        if len(raw) > MAX_LINE_LENGTH:
            raise LineTooLongError(MAX_LINE_LENGTH)

        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise ReadError("input line is not valid UTF-8") from ex

        key, sep, value = line.partition("=")
        if not sep:
            raise InvalidLineError(line)

        if key in FIELDS:
            record.set_field(key, value)
        elif key == "url" and url_support:
            from .url import set_url

            set_url(record, value)
        else:
            logger.debug("ignoring unknown key %r", key)
    return record


def parse_credential(data: Union[bytes, str], *, url_support: bool = True) -> CredentialRecord:
    """Parse a credential record held in memory."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return read_credential(io.BytesIO(data), url_support=url_support)
