# assertion_core/parser.py
from __future__ import annotations
from typing import Tuple
import re

from .atoms import AssertionAtom
from .constants import KEYBASE_KEY
from .context import AssertionContext
from .errors import InvalidSyntaxError, MissingTypeError
from .logger import get_logger

log = get_logger("assertion_core.parser")

_PAIR_RE = re.compile(r"[0-9a-zA-Z@:/_-]")


def parse_key_value(token: str) -> Tuple[str, str]:
    """
    Split one assertion token into (key, value).

    Accepted forms, first match wins:
      - key:value   (a leading "//" on the value is dropped, so dns://host works)
      - value@key
      - value       (key is empty)
    """
    if not _PAIR_RE.match(token):
        log.debug(f"[PARSE] rejected token={token!r}")
        raise InvalidSyntaxError(token)

    key, value = "", token
    if ":" in token:
        key, value = token.split(":", 1)
        if value.startswith("//"):
            value = value[2:]
    elif "@" in token:
        value, key = token.split("@", 1)
    return key.lower(), value


def parse_atom_key_value(ctx: AssertionContext, key: str, value: str, strict: bool) -> AssertionAtom:
    if not key:
        if strict:
            raise MissingTypeError(value)
        key = KEYBASE_KEY
    return AssertionAtom.make(key, value).check_and_normalize(ctx)


def parse_atom(ctx: AssertionContext, token: str, strict: bool = False) -> AssertionAtom:
    key, value = parse_key_value(token)
    return parse_atom_key_value(ctx, key, value, strict)
