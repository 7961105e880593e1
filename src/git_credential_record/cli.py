"""Command-line interface for git_credential_record.

A filter, handy when writing or debugging credential helpers:
- starts from ``--url`` when given
- overlays a record read from a file or stdin
- applies ``--set`` / ``--unset`` edits in order
- writes the record to stdout, followed by a blank line

It does not implement the helper ``get`` / ``store`` / ``erase`` actions.
"""

from __future__ import annotations
import argparse
import contextlib
import logging
import sys
from typing import BinaryIO, ContextManager, Optional

from .errors import CredentialError
from .parser import read_credential
from .record import FIELDS, CredentialRecord
from .writer import write_credential

logger = logging.getLogger(__name__)

Edit = tuple[str, str, Optional[str]]


def _open_input(path: str) -> ContextManager[BinaryIO]:
    if path == "-":
        return contextlib.nullcontext(sys.stdin.buffer)
    return open(path, "rb")


def _field_name(text: str) -> str:
    if text not in FIELDS:
        raise argparse.ArgumentTypeError(f"unknown field {text!r} (choose from {', '.join(FIELDS)})")
    return text


def _set_edit(text: str) -> Edit:
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return ("set", _field_name(key), value)


def _unset_edit(text: str) -> Edit:
    return ("unset", _field_name(text), None)


def apply_edits(record: CredentialRecord, edits: list[Edit]) -> None:
    for op, name, value in edits:
        if op == "set":
            record.set_field(name, value)  # type: ignore[arg-type]
        else:
            record.clear_field(name)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="git-credential-record",
        description="Read, edit and rewrite a git credential record.",
    )
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Input file path or '-' for stdin (default: stdin unless --url is given)",
    )
    p.add_argument("--url", help="Start from the fields of this URL")
    p.add_argument("--set", dest="edits", action="append", type=_set_edit, default=[],
                   metavar="KEY=VALUE", help="Set a field (repeatable)")
    p.add_argument("--unset", dest="edits", action="append", type=_unset_edit,
                   metavar="KEY", help="Clear a field (repeatable)")
    p.add_argument("--no-url", action="store_true", help="Ignore url= lines in the input")
    p.add_argument("-v", "--verbose", action="store_true", help="Log parser decisions to stderr")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    path = args.path
    if path is None and args.url is None:
        path = "-"

    try:
        record = CredentialRecord()
        if args.url is not None:
            from .url import set_url

            set_url(record, args.url)
        if path is not None:
            with _open_input(path) as fh:
                parsed = read_credential(fh, url_support=not args.no_url)
            for name, value in parsed.items():
                record.set_field(name, value)
        apply_edits(record, args.edits)
    except (CredentialError, OSError) as ex:
        logger.debug("failed to build record", exc_info=True)
        sys.stderr.write(f"error: {ex}\n")
        return 2

    out = sys.stdout.buffer
    write_credential(record, out)
    out.write(b"\n")
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
