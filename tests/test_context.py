import logging
import pytest
from assertion_core.context import (
    StaticAssertionContext, SocialService, BUILTIN_SERVICES, load_assertion_context,
)
from assertion_core.errors import InvalidSocialNameError, UnknownServiceError
from assertion_core.parser import parse_atom


def test_static_context_normalizes():
    ctx = StaticAssertionContext()
    assert ctx.normalize_social_name("twitter", "Bob_1") == "bob_1"
    with pytest.raises(InvalidSocialNameError):
        ctx.normalize_social_name("reddit", "ab")
    with pytest.raises(UnknownServiceError):
        ctx.normalize_social_name("myspace", "bob")


def test_custom_service_registry():
    ctx = StaticAssertionContext([SocialService("mastodon", r"[a-z0-9_]{1,30}")])
    assert parse_atom(ctx, "bob@mastodon").to_string() == "bob@mastodon"
    with pytest.raises(UnknownServiceError):
        parse_atom(ctx, "bob@twitter")


def test_factory_defaults(monkeypatch):
    monkeypatch.delenv("ASSERTION_CONTEXT_PROVIDER", raising=False)
    monkeypatch.delenv("ASSERTION_SERVICES", raising=False)
    ctx = load_assertion_context()
    assert isinstance(ctx, StaticAssertionContext)
    assert set(ctx.services) == set(BUILTIN_SERVICES)


def test_factory_env_restricts_services(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="assertion_core.context")
    monkeypatch.setenv("ASSERTION_SERVICES", "twitter, GitHub")
    ctx = load_assertion_context()
    assert set(ctx.services) == {"twitter", "github"}
    assert "static services=twitter,github" in caplog.text
    with pytest.raises(UnknownServiceError):
        parse_atom(ctx, "reddit:bob")


def test_factory_config_wins_over_env(monkeypatch):
    monkeypatch.setenv("ASSERTION_SERVICES", "twitter")
    ctx = load_assertion_context({"provider": "static", "services": ["rooter"]})
    assert set(ctx.services) == {"rooter"}


def test_factory_rejects_unknown(monkeypatch):
    with pytest.raises(ValueError):
        load_assertion_context({"provider": "ldap"})
    monkeypatch.setenv("ASSERTION_CONTEXT_PROVIDER", "ldap")
    with pytest.raises(ValueError):
        load_assertion_context()
    with pytest.raises(ValueError):
        load_assertion_context({"provider": "static", "services": ["myspace"]})
