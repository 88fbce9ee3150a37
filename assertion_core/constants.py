# assertion_core/constants.py

PGP_ASSERTION_KEY = "fingerprint"
PGP_FINGERPRINT_HEX_LEN = 40
MIN_FINGERPRINT_QUERY_LEN = 4   # 2 bytes

KEYBASE_KEY = "keybase"
ROOTER_SERVICE = "rooter"

UID_LEN = 16
UID_SUFFIXES = (0x00, 0x19)

TEAMID_LEN = 16
TEAMID_PRIVATE_SUFFIX = 0x24
TEAMID_PUBLIC_SUFFIX = 0x25
TEAMID_PRIVATE_SUBTEAM_SUFFIX = 0x2E
TEAMID_PUBLIC_SUBTEAM_SUFFIX = 0x2F

IMPLICIT_TEAM_PREFIX = "__keybase_implicit_team__"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CONTEXT_PROVIDER = "static"
