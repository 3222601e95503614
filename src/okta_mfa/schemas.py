"""
Okta factor schemas for decoded factors, verification requests and login
responses.

Factors arrive from Okta discriminated by ``factorType``; each kind decodes
into its own frozen model. Verification requests are the outgoing payload
shapes, one per kind that can be verified.
"""

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from okta_mfa.constants import (
    FactorId,
    FactorProvider,
    FactorStatus,
    FactorType,
    PassCode,
    StateToken,
)
from okta_mfa.exceptions import (
    FactorDecodeError,
    InvalidVerificationRequestError,
    UnknownFactorTypeError,
    UnsupportedVerificationMethodError,
)
from okta_mfa.links import Link


# Profile Models
class SmsFactorProfile(BaseModel):
    """Profile of an SMS factor."""

    model_config = {"populate_by_name": True, "frozen": True}

    phone_number: str = Field(..., alias="phoneNumber")


class CallFactorProfile(BaseModel):
    """Profile of a voice call factor."""

    model_config = {"populate_by_name": True, "frozen": True}

    phone_number: str = Field(..., alias="phoneNumber")
    phone_extension: str | None = Field(None, alias="phoneExtension")


class QuestionFactorProfile(BaseModel):
    """Profile of a security question factor."""

    model_config = {"populate_by_name": True, "frozen": True}

    question: str = Field(..., description="Question code, e.g. favorite_art_piece")
    question_text: str = Field(..., alias="questionText")
    answer: str | None = Field(None, repr=False)


class TokenFactorProfile(BaseModel):
    """Profile shared by software and hardware token factors."""

    model_config = {"populate_by_name": True, "frozen": True}

    credential_id: str = Field(..., alias="credentialId", repr=False)


class WebFactorProfile(BaseModel):
    """Profile of a web (e.g. Duo) factor."""

    model_config = {"populate_by_name": True, "frozen": True}

    credential_id: str = Field(..., alias="credentialId", repr=False)


class FactorVerification(BaseModel):
    """Verification state Okta attaches to some token factors."""

    model_config = {"populate_by_name": True, "frozen": True}

    pass_code: PassCode = Field(..., alias="passCode", repr=False)
    next_pass_code: PassCode | None = Field(None, alias="nextPassCode", repr=False)


# Factor Models
class BaseFactor(BaseModel):
    """Fields carried by every factor kind."""

    model_config = {"populate_by_name": True, "frozen": True}

    id: FactorId = Field(..., description="Factor id assigned by Okta")
    provider: FactorProvider
    status: FactorStatus | None = None
    links: dict[str, Link] = Field(..., alias="_links")

    @property
    def kind(self) -> FactorType:
        return FactorType(self.factor_type)

    def __str__(self) -> str:
        return self.display_name


class PushFactor(BaseFactor):
    factor_type: Literal["push"] = Field("push", alias="factorType")

    @property
    def display_name(self) -> str:
        return "Okta Verify Push"


class SmsFactor(BaseFactor):
    factor_type: Literal["sms"] = Field("sms", alias="factorType")
    profile: SmsFactorProfile

    @property
    def display_name(self) -> str:
        return f"Okta SMS to {self.profile.phone_number}"


class CallFactor(BaseFactor):
    factor_type: Literal["call"] = Field("call", alias="factorType")
    profile: CallFactorProfile

    @property
    def display_name(self) -> str:
        return f"Okta Call to {self.profile.phone_number}"


class TokenFactor(BaseFactor):
    factor_type: Literal["token"] = Field("token", alias="factorType")
    profile: TokenFactorProfile
    verify: FactorVerification | None = None

    @property
    def display_name(self) -> str:
        return "Okta One-time Password"


class TotpFactor(BaseFactor):
    factor_type: Literal["token:software:totp"] = Field(
        "token:software:totp", alias="factorType"
    )
    profile: TokenFactorProfile

    @property
    def display_name(self) -> str:
        return "Okta Time-based One-time Password"


class HotpFactor(BaseFactor):
    factor_type: Literal["token:hardware"] = Field(
        "token:hardware", alias="factorType"
    )
    profile: TokenFactorProfile
    verify: FactorVerification | None = None

    @property
    def display_name(self) -> str:
        return "Okta Hardware One-time Password"


class QuestionFactor(BaseFactor):
    factor_type: Literal["question"] = Field("question", alias="factorType")
    profile: QuestionFactorProfile

    @property
    def display_name(self) -> str:
        return f"Question: {self.profile.question_text}"


class WebFactor(BaseFactor):
    factor_type: Literal["web"] = Field("web", alias="factorType")
    profile: WebFactorProfile

    @property
    def display_name(self) -> str:
        return "Okta Web"


Factor = Annotated[
    PushFactor
    | SmsFactor
    | CallFactor
    | TokenFactor
    | TotpFactor
    | HotpFactor
    | QuestionFactor
    | WebFactor,
    Field(discriminator="factor_type"),
]

FACTOR_MODELS: dict[FactorType, type[BaseFactor]] = {
    FactorType.PUSH: PushFactor,
    FactorType.SMS: SmsFactor,
    FactorType.CALL: CallFactor,
    FactorType.TOKEN: TokenFactor,
    FactorType.TOTP: TotpFactor,
    FactorType.HOTP: HotpFactor,
    FactorType.QUESTION: QuestionFactor,
    FactorType.WEB: WebFactor,
}

_factor_adapter: TypeAdapter[Factor] = TypeAdapter(Factor)


def parse_factor(payload: Mapping[str, Any]) -> Factor:
    """Decode one factor payload into its factor model.

    Args:
        payload: Factor JSON object as sent by Okta

    Returns:
        The factor model selected by ``factorType``

    Raises:
        UnknownFactorTypeError: If ``factorType`` is missing or unrecognized
        FactorDecodeError: If the payload does not match the factor's shape
    """
    if not isinstance(payload, Mapping):
        raise FactorDecodeError(
            f"Factor payload must be an object, got {type(payload).__name__}"
        )

    raw_type = payload.get("factorType")
    try:
        factor_type = FactorType(raw_type)
    except (ValueError, TypeError):
        raise UnknownFactorTypeError(raw_type, payload=dict(payload)) from None

    try:
        return _factor_adapter.validate_python(dict(payload))
    except ValidationError as e:
        raise FactorDecodeError(
            f"Invalid '{factor_type.value}' factor payload: {e}", payload=dict(payload)
        ) from e


def parse_factors(payloads: Iterable[Mapping[str, Any]]) -> list[Factor]:
    """Decode a list of factor payloads, failing on the first invalid one."""
    return [parse_factor(payload) for payload in payloads]


# Verification Request Models
class VerificationRequest(BaseModel):
    """Base class for outgoing factor verification payloads."""

    model_config = {"populate_by_name": True, "frozen": True}

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the wire, omitting fields that are not set."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class QuestionVerificationRequest(VerificationRequest):
    answer: str = Field(..., min_length=1, repr=False)


class SmsVerificationRequest(VerificationRequest):
    state_token: StateToken = Field(..., alias="stateToken", min_length=1, repr=False)
    pass_code: PassCode | None = Field(
        None, alias="passCode", min_length=1, repr=False
    )


class CallVerificationRequest(VerificationRequest):
    pass_code: PassCode | None = Field(
        None, alias="passCode", min_length=1, repr=False
    )


class TotpVerificationRequest(VerificationRequest):
    pass_code: PassCode = Field(..., alias="passCode", min_length=1, repr=False)


class TokenVerificationRequest(VerificationRequest):
    pass_code: PassCode = Field(..., alias="passCode", min_length=1, repr=False)


FactorVerificationRequest = (
    QuestionVerificationRequest
    | SmsVerificationRequest
    | CallVerificationRequest
    | TotpVerificationRequest
    | TokenVerificationRequest
)

# Request model and the secret inputs it takes, per verifiable factor kind
_REQUEST_SHAPES: dict[FactorType, tuple[type[VerificationRequest], frozenset[str]]] = {
    FactorType.QUESTION: (QuestionVerificationRequest, frozenset({"answer"})),
    FactorType.SMS: (SmsVerificationRequest, frozenset({"state_token", "pass_code"})),
    FactorType.CALL: (CallVerificationRequest, frozenset({"pass_code"})),
    FactorType.TOTP: (TotpVerificationRequest, frozenset({"pass_code"})),
    FactorType.TOKEN: (TokenVerificationRequest, frozenset({"pass_code"})),
}


def build_verification_request(
    factor_type: FactorType | str,
    *,
    pass_code: PassCode | None = None,
    answer: str | None = None,
    state_token: StateToken | None = None,
) -> FactorVerificationRequest:
    """Build the verification payload for a factor kind.

    Args:
        factor_type: Kind of factor being verified
        pass_code: One-time pass code, for code based factors
        answer: Answer to a security question
        state_token: State token of the login transaction

    Returns:
        The request model for the factor kind

    Raises:
        UnsupportedVerificationMethodError: If the kind has no request shape
        InvalidVerificationRequestError: If secrets are missing, empty or
            not used by the kind
    """
    try:
        kind = FactorType(factor_type)
    except ValueError:
        raise UnknownFactorTypeError(factor_type) from None

    if kind not in _REQUEST_SHAPES:
        raise UnsupportedVerificationMethodError(kind)

    model, accepted = _REQUEST_SHAPES[kind]
    supplied = {
        name: value
        for name, value in (
            ("pass_code", pass_code),
            ("answer", answer),
            ("state_token", state_token),
        )
        if value is not None
    }

    unused = sorted(set(supplied) - accepted)
    if unused:
        raise InvalidVerificationRequestError(
            f"{', '.join(unused)} not used when verifying a '{kind.value}' factor"
        )

    try:
        return model(**supplied)
    except ValidationError as e:
        missing = sorted(
            str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"
        )
        if missing:
            message = f"Missing {', '.join(missing)} for '{kind.value}' verification"
        else:
            message = f"Invalid input for '{kind.value}' verification"
        raise InvalidVerificationRequestError(message) from e


# Response Models
class LoginResponse(BaseModel):
    """Okta authentication transaction returned after a verification.

    Fields this package does not know about are kept as extras, so the
    payload round-trips through ``to_payload`` unchanged.
    """

    model_config = {"populate_by_name": True, "frozen": True, "extra": "allow"}

    status: str | None = Field(None, description="Transaction state, e.g. SUCCESS")
    state_token: StateToken | None = Field(None, alias="stateToken", repr=False)
    session_token: str | None = Field(None, alias="sessionToken", repr=False)
    expires_at: str | None = Field(None, alias="expiresAt")
    factor_result: str | None = Field(None, alias="factorResult")
    embedded: dict[str, Any] | None = Field(None, alias="_embedded")
    links: dict[str, Any] | None = Field(None, alias="_links")

    def to_payload(self) -> dict[str, Any]:
        """Return the response as it was received."""
        fields = type(self).model_fields
        received = {
            fields[name].alias or name
            for name in self.model_fields_set
            if name in fields
        }
        received.update(self.model_extra or {})
        return {
            key: value
            for key, value in self.model_dump(by_alias=True, mode="json").items()
            if key in received
        }

    def factors(self) -> list[Factor]:
        """Decode the factors embedded in the transaction, if any."""
        if not self.embedded:
            return []
        return parse_factors(self.embedded.get("factors") or [])
