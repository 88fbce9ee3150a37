# assertion_core/context.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol
import os
import re

from .constants import DEFAULT_CONTEXT_PROVIDER
from .errors import InvalidSocialNameError, UnknownServiceError
from .logger import get_logger

log = get_logger("assertion_core.context")


class AssertionContext(Protocol):
    """
    Capability injected into the parsers.

    The only thing the assertion engine needs from its host is a way to
    check and canonicalize a username on an external social service.
    Implementations must be synchronous and deterministic.
    """

    def normalize_social_name(self, service: str, username: str) -> str: ...


@dataclass(frozen=True)
class SocialService:
    name: str
    username_re: str
    hint: str = ""

    def normalize(self, username: str) -> str:
        name = username.lower()
        if not re.fullmatch(self.username_re, name):
            raise InvalidSocialNameError(f"{username}@{self.name}", self.hint or None)
        return name


BUILTIN_SERVICES: Dict[str, SocialService] = {
    s.name: s for s in (
        SocialService("twitter", r"[a-z0-9_]{1,20}", "up to 20 letters, numbers or underscores"),
        SocialService("github", r"[a-z0-9][a-z0-9-]{0,38}", "up to 39 letters, numbers or dashes"),
        SocialService("reddit", r"[-_a-z0-9]{3,20}", "3 to 20 letters, numbers, dashes or underscores"),
        SocialService("hackernews", r"[a-z0-9_-]{2,15}", "2 to 15 letters, numbers, dashes or underscores"),
        SocialService("facebook", r"[a-z0-9.]{1,50}", "up to 50 letters, numbers or dots"),
        SocialService("rooter", r"[a-z0-9_]{1,20}", "up to 20 letters, numbers or underscores"),
    )
}


class StaticAssertionContext:
    """AssertionContext backed by a fixed registry of social services."""

    def __init__(self, services: Optional[Iterable[SocialService]] = None):
        if services is None:
            services = BUILTIN_SERVICES.values()
        self.services: Dict[str, SocialService] = {s.name: s for s in services}

    def normalize_social_name(self, service: str, username: str) -> str:
        svc = self.services.get(service)
        if svc is None:
            raise UnknownServiceError(service, f"known services: {', '.join(sorted(self.services))}")
        return svc.normalize(username)


def load_assertion_context(config: dict | None = None) -> AssertionContext:
    """
    Factory resolver for the runtime assertion context.

    For now:
        - static (default): built-in social service registry,
          optionally restricted via config["services"] / ASSERTION_SERVICES
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("ASSERTION_CONTEXT_PROVIDER", DEFAULT_CONTEXT_PROVIDER)

    if provider == "static":
        names = config.get("services")
        if names is None:
            raw = os.getenv("ASSERTION_SERVICES", "")
            names = [n.strip().lower() for n in raw.split(",") if n.strip()] or None

        if names is None:
            services = list(BUILTIN_SERVICES.values())
        else:
            unknown = [n for n in names if n not in BUILTIN_SERVICES]
            if unknown:
                raise ValueError(f"Unknown social services: {', '.join(unknown)}")
            services = [BUILTIN_SERVICES[n] for n in names]

        log.info(f"[CONTEXT] static services={','.join(s.name for s in services)}")
        return StaticAssertionContext(services)

    raise ValueError(f"Unknown assertion context provider: {provider}")
