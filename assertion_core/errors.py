# assertion_core/errors.py
from __future__ import annotations
from typing import Optional


class AssertionCoreError(Exception):
    pass


class InvalidSyntaxError(AssertionCoreError):
    def __init__(self, token: str):
        super().__init__(f"Invalid key-value identity: {token}")
        self.token = token


class MissingTypeError(AssertionCoreError):
    def __init__(self, value: str):
        super().__init__(f"Bad assertion, no 'type' given: {value}")
        self.value = value


class NormalizationError(AssertionCoreError):
    """
    Raised when a single assertion value fails the checks for its kind.

    Carries the offending value and, where the validator offers one,
    a human-readable hint.
    """
    label = "value"

    def __init__(self, value: str, hint: Optional[str] = None):
        msg = f"bad {self.label} '{value}'"
        if hint:
            msg = f"{msg}: {hint}"
        super().__init__(msg)
        self.value = value
        self.hint = hint


class InvalidUsernameError(NormalizationError):
    label = "keybase username"


class InvalidHostnameError(NormalizationError):
    label = "hostname"


class InvalidHexError(NormalizationError):
    label = "hex string"


class InvalidUidError(NormalizationError):
    label = "uid"


class InvalidTeamIdError(NormalizationError):
    label = "team id"


class InvalidTeamNameError(NormalizationError):
    label = "team name"


class InvalidSocialNameError(NormalizationError):
    label = "social username"


class UnknownServiceError(NormalizationError):
    label = "social network"


class NotConvertibleError(AssertionCoreError):
    pass


class FingerprintTooShortError(AssertionCoreError):
    def __init__(self, value: str):
        super().__init__(f"fingerprint queries must be at least 2 bytes long: {value}")
        self.value = value


class FingerprintTooLongError(AssertionCoreError):
    def __init__(self, value: str):
        super().__init__(f"bad fingerprint; too long: {value}")
        self.value = value


# --------- implicit team display names ----------
class ImplicitTeamDisplayNameError(AssertionCoreError):
    def __init__(self, msg: str, part: Optional[str] = None):
        super().__init__(f"Error parsing implicit team name: {msg}")
        self.part = part


class TooManySeparatorsError(ImplicitTeamDisplayNameError):
    pass


class NoWritersError(ImplicitTeamDisplayNameError):
    pass


class InvalidPartError(ImplicitTeamDisplayNameError):
    pass


class EmptySuffixError(ImplicitTeamDisplayNameError):
    pass


class BadSuffixError(ImplicitTeamDisplayNameError):
    pass


class BadGenerationError(ImplicitTeamDisplayNameError):
    pass


class InvalidTlfPathError(AssertionCoreError):
    def __init__(self, path: str, reason: str = "Invalid team TLF name"):
        super().__init__(f"{reason}: {path}")
        self.path = path
