"""Credential records derived from URLs.

Only the URL -> record direction exists. Every field is either set from the
URL or cleared, so a record never keeps a stale value from an earlier URL.
"""

from __future__ import annotations
import re
from typing import Union
from urllib.parse import SplitResult, urlsplit

from .errors import InvalidUrlError
from .record import CredentialRecord


# Schemes that cannot be used without a host.
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

# Whitespace, control characters and delimiters not allowed in a host,
# plus any "%" not followed by two hex digits.
_BAD_HOST = re.compile(r'[\x00-\x20\x7f<>^|"`{}\\]|%(?![0-9A-Fa-f]{2})')

UrlLike = Union[str, SplitResult]


def parse_url(text: str) -> SplitResult:
    """Split an absolute URL.

    Raises:
        InvalidUrlError: if ``text`` has no scheme, a malformed authority
            or a host with characters a URL cannot carry.
    """
    try:
        parts = urlsplit(text)
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError as ex:
        raise InvalidUrlError(text, str(ex)) from ex

    if not parts.scheme:
        raise InvalidUrlError(text, "relative URL without a base")
    hostname = _hostname_of(_host_of(parts))
    if parts.scheme in _HOST_SCHEMES and not hostname:
        raise InvalidUrlError(text, "empty host")
    if _BAD_HOST.search(hostname):
        raise InvalidUrlError(text, "invalid host")
    return parts


def _host_of(parts: SplitResult) -> str:
    # netloc minus userinfo, keeping a non-empty ":port"
    return parts.netloc.rpartition("@")[2].removesuffix(":")


def _hostname_of(host: str) -> str:
    if host.startswith("["):
        return host[: host.find("]") + 1]
    return host.partition(":")[0]


def set_url(record: CredentialRecord, url: UrlLike) -> None:
    """Overwrite every field of ``record`` from ``url``.

    Empty usernames and passwords count as absent.
    """
    parts = parse_url(url) if isinstance(url, str) else url

    record.set_field("protocol", parts.scheme)
    record.put_field("host", _host_of(parts) or None)
    record.set_field("path", parts.path.removeprefix("/"))
    record.put_field("username", parts.username or None)
    record.put_field("password", parts.password or None)


def from_url(url: UrlLike) -> CredentialRecord:
    """Build a new record from ``url``."""
    record = CredentialRecord()
    set_url(record, url)
    return record
