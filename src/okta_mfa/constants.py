"""
Okta factor constants and enums.

Wire values for factor discriminators, providers and statuses, as sent by
the Okta authentication API.
"""

from enum import Enum


class FactorType(str, Enum):
    """Values of the ``factorType`` discriminator."""

    PUSH = "push"
    SMS = "sms"
    CALL = "call"
    TOKEN = "token"
    TOTP = "token:software:totp"
    HOTP = "token:hardware"
    QUESTION = "question"
    WEB = "web"


class FactorProvider(str, Enum):
    """Vendors that back an enrolled factor."""

    OKTA = "OKTA"
    RSA = "RSA"
    SYMANTEC = "SYMANTEC"
    GOOGLE = "GOOGLE"
    DUO = "DUO"
    YUBICO = "YUBICO"


class FactorStatus(str, Enum):
    """Enrollment status of a factor."""

    NOT_SETUP = "NOT_SETUP"
    PENDING_ACTIVATION = "PENDING_ACTIVATION"
    ENROLLED = "ENROLLED"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"


class LinkRelation(str, Enum):
    """Hypermedia relations used on factor resources."""

    VERIFY = "verify"


class ContentType(str, Enum):
    """Media types sent and accepted on the wire."""

    JSON = "application/json"


# Keys whose values are secret on verification payloads and responses
SENSITIVE_FIELDS = frozenset(
    {"answer", "passCode", "nextPassCode", "stateToken", "sessionToken"}
)

MASKED_VALUE = "***MASKED***"

# Type aliases for better readability
FactorId = str
StateToken = str
PassCode = str
