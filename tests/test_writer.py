import io

import pytest

from git_credential_record.parser import parse_credential
from git_credential_record.record import CredentialRecord
from git_credential_record.writer import render_credential, write_credential


def test_fixed_field_order():
    rec = CredentialRecord(password="p", username="u", path="r", host="h", protocol="https")
    assert render_credential(rec) == b"protocol=https\nhost=h\npath=r\nusername=u\npassword=p\n"


def test_absent_fields_skipped_and_no_terminator():
    assert render_credential(CredentialRecord(host="example.com")) == b"host=example.com\n"
    assert render_credential(CredentialRecord()) == b""


def test_empty_value_written():
    assert render_credential(CredentialRecord(username="")) == b"username=\n"


def test_values_written_verbatim_as_utf8():
    rec = CredentialRecord(password="a=b ü\t")
    assert render_credential(rec) == "password=a=b ü\t\n".encode("utf-8")


def test_record_not_mutated():
    rec = CredentialRecord(protocol="https", password="x")
    write_credential(rec, io.BytesIO())
    assert rec == CredentialRecord(protocol="https", password="x")


class _FullSink:
    def write(self, data):
        raise OSError("no space left")


def test_sink_errors_propagate_unchanged():
    with pytest.raises(OSError, match="no space left"):
        write_credential(CredentialRecord(host="h"), _FullSink())


def test_nothing_written_for_empty_record():
    write_credential(CredentialRecord(), _FullSink())


@pytest.mark.parametrize(
    "rec",
    [
        CredentialRecord(protocol="https", host="example.com:8088", path="a/b.git", username="alice", password="s=e"),
        CredentialRecord(username="", password=""),
        CredentialRecord(path="/leading/kept"),
    ],
)
def test_write_then_parse_gives_same_record(rec):
    buf = io.BytesIO()
    write_credential(rec, buf)
    assert parse_credential(buf.getvalue() + b"\n") == rec
    assert parse_credential(buf.getvalue()) == rec
