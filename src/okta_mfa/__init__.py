"""
Okta MFA factor verification package.

This package decodes the MFA factors Okta returns during a login
transaction, resolves their hypermedia links and verifies a chosen factor.
"""

from .client import OktaFactorClient, verify_factor
from .config import OktaSettings, get_okta_settings, set_okta_settings
from .constants import FactorProvider, FactorStatus, FactorType, LinkRelation
from .exceptions import (
    EmptyLinkCollectionError,
    FactorDecodeError,
    IncompatibleVerificationRequestError,
    InvalidVerificationRequestError,
    LinkResolutionError,
    MissingLinkRelationError,
    OktaAPIError,
    OktaAuthenticationError,
    OktaBadRequestError,
    OktaConnectionError,
    OktaForbiddenError,
    OktaMfaError,
    OktaRateLimitError,
    OktaServerError,
    OktaTimeoutError,
    ResponseDecodeError,
    UnknownFactorTypeError,
    UnsupportedVerificationMethodError,
)
from .links import Link, LinkObject, MultiLink, SingleLink, resolve_link
from .schemas import (
    CallFactor,
    CallVerificationRequest,
    Factor,
    FactorVerificationRequest,
    HotpFactor,
    LoginResponse,
    PushFactor,
    QuestionFactor,
    QuestionVerificationRequest,
    SmsFactor,
    SmsVerificationRequest,
    TokenFactor,
    TokenVerificationRequest,
    TotpFactor,
    TotpVerificationRequest,
    WebFactor,
    build_verification_request,
    parse_factor,
    parse_factors,
)

__all__ = [
    "CallFactor",
    "CallVerificationRequest",
    "EmptyLinkCollectionError",
    "Factor",
    "FactorDecodeError",
    "FactorProvider",
    "FactorStatus",
    "FactorType",
    "FactorVerificationRequest",
    "HotpFactor",
    "IncompatibleVerificationRequestError",
    "InvalidVerificationRequestError",
    "Link",
    "LinkObject",
    "LinkRelation",
    "LinkResolutionError",
    "LoginResponse",
    "MissingLinkRelationError",
    "MultiLink",
    "OktaAPIError",
    "OktaAuthenticationError",
    "OktaBadRequestError",
    "OktaConnectionError",
    "OktaFactorClient",
    "OktaForbiddenError",
    "OktaMfaError",
    "OktaRateLimitError",
    "OktaServerError",
    "OktaSettings",
    "OktaTimeoutError",
    "PushFactor",
    "QuestionFactor",
    "QuestionVerificationRequest",
    "ResponseDecodeError",
    "SingleLink",
    "SmsFactor",
    "SmsVerificationRequest",
    "TokenFactor",
    "TokenVerificationRequest",
    "TotpFactor",
    "TotpVerificationRequest",
    "UnknownFactorTypeError",
    "UnsupportedVerificationMethodError",
    "WebFactor",
    "build_verification_request",
    "get_okta_settings",
    "parse_factor",
    "parse_factors",
    "resolve_link",
    "verify_factor",
]
