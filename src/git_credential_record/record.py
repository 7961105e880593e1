"""The credential record exchanged with git credential helpers.

A record holds up to five text fields:

    protocol   transport scheme, e.g. "https"
    host       remote host, with ":port" when one was given
    path       repository path on the server, without a leading "/"
    username   credential identity
    password   credential secret

Every field is either absent (None) or a string. An empty string is a
present value; only assignment makes a field present.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Iterator, Optional

from .errors import FieldError


# Wire order used by the writer.
FIELDS: tuple[str, ...] = ("protocol", "host", "path", "username", "password")


@dataclass
class CredentialRecord:
    protocol: Optional[str] = None
    host: Optional[str] = None
    path: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def set_field(self, name: str, value: str) -> None:
        """Overwrite a field with new text."""
        _check_name(name)
        setattr(self, name, value)

    def clear_field(self, name: str) -> None:
        """Reset a field to absent."""
        _check_name(name)
        setattr(self, name, None)

    def put_field(self, name: str, value: Optional[str]) -> None:
        """Set a field when ``value`` is given, clear it otherwise."""
        if value is None:
            self.clear_field(name)
        else:
            self.set_field(name, value)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` for present fields, in wire order."""
        for name in FIELDS:
            value = getattr(self, name)
            if value is not None:
                yield name, value

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in FIELDS)

    def __repr__(self) -> str:
        parts = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "password" and value is not None:
                parts.append("password='***'")
            else:
                parts.append(f"{f.name}={value!r}")
        return f"CredentialRecord({', '.join(parts)})"


def _check_name(name: str) -> None:
    if name not in FIELDS:
        raise FieldError(f"unknown credential field: {name!r}")
