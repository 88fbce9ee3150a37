import logging
import pytest
from assertion_core.context import StaticAssertionContext
from assertion_core.errors import InvalidSyntaxError, MissingTypeError
from assertion_core.parser import parse_key_value, parse_atom, parse_atom_key_value

CTX = StaticAssertionContext()


@pytest.mark.parametrize("token, expected", [
    ("twitter:alice", ("twitter", "alice")),
    ("Twitter:Alice", ("twitter", "Alice")),
    ("alice@Twitter", ("twitter", "alice")),
    ("alice", ("", "alice")),
    ("dns://example.com", ("dns", "example.com")),
    ("https://example.com", ("https", "example.com")),
    # colon wins over at-sign
    ("bob@twitter:x", ("bob@twitter", "x")),
    (":alice", ("", "alice")),
])
def test_parse_key_value(token, expected):
    assert parse_key_value(token) == expected


@pytest.mark.parametrize("token", ["", "(alice)", " alice", "+bob", ".com"])
def test_parse_key_value_invalid_syntax(token):
    with pytest.raises(InvalidSyntaxError):
        parse_key_value(token)


def test_rejected_token_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="assertion_core.parser")
    with pytest.raises(InvalidSyntaxError):
        parse_key_value("!nope")
    assert "rejected token" in caplog.text


def test_default_key_is_keybase():
    a = parse_atom(CTX, "Alice")
    assert a.is_keybase()
    assert a.value == "alice"


def test_strict_requires_type():
    with pytest.raises(MissingTypeError):
        parse_atom(CTX, "alice", strict=True)
    assert parse_atom(CTX, "alice@keybase", strict=True).is_keybase()


@pytest.mark.parametrize("key, check", [
    ("keybase", "is_keybase"),
    ("uid", "is_uid"),
    ("tid", "is_team_id"),
    ("team", "is_team_name"),
    ("fingerprint", "is_fingerprint"),
    ("rooter", "is_social"),
])
def test_dispatch_on_key(key, check):
    values = {
        "keybase": "alice",
        "uid": "0123456789abcdef0123456789abcd19",
        "tid": "0123456789abcdef0123456789abcd24",
        "team": "acme",
        "fingerprint": "ab12",
        "rooter": "bob",
    }
    a = parse_atom_key_value(CTX, key, values[key], strict=True)
    assert getattr(a, check)()
    assert a.key == key


def test_web_kinds_keep_their_key():
    for key in ("web", "http", "https", "dns"):
        a = parse_atom(CTX, f"{key}://Example.COM")
        assert a.key == key
        assert a.value == "example.com"
        assert a.is_remote()
