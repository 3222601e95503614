"""Okta factor verification client."""

from typing import Any

import httpx
from pydantic import ValidationError

from okta_mfa.config import OktaSettings, get_okta_settings
from okta_mfa.constants import MASKED_VALUE, SENSITIVE_FIELDS, ContentType, LinkRelation
from okta_mfa.exceptions import (
    IncompatibleVerificationRequestError,
    OktaAPIError,
    OktaAuthenticationError,
    OktaBadRequestError,
    OktaConnectionError,
    OktaForbiddenError,
    OktaRateLimitError,
    OktaServerError,
    OktaTimeoutError,
    ResponseDecodeError,
    UnsupportedVerificationMethodError,
)
from okta_mfa.links import resolve_link
from okta_mfa.schemas import (
    BaseFactor,
    CallFactor,
    Factor,
    FactorVerificationRequest,
    HotpFactor,
    LoginResponse,
    PushFactor,
    QuestionFactor,
    SmsFactor,
    SmsVerificationRequest,
    TokenFactor,
    TotpFactor,
    VerificationRequest,
    WebFactor,
)
from okta_mfa.utils.logger import logger

# Factor kinds without a verification path yet. Push needs a polling flow
# on the factor result link rather than a single request.
UNSUPPORTED_FACTORS: tuple[type[BaseFactor], ...] = (
    PushFactor,
    CallFactor,
    TokenFactor,
    TotpFactor,
    HotpFactor,
    QuestionFactor,
    WebFactor,
)


class OktaFactorClient:
    """Synchronous client for verifying Okta MFA factors.

    Every call to ``verify`` opens its own HTTP client and makes exactly one
    request; the instance itself only holds settings and an optional
    transport.
    """

    def __init__(
        self,
        settings: OktaSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the factor client.

        Args:
            settings: Okta settings; the global settings are used when omitted
            transport: Optional httpx transport for every HTTP client, e.g.
                ``httpx.MockTransport``
        """
        self.settings = settings or get_okta_settings()
        self._transport = transport

    def _build_client(self) -> httpx.Client:
        """Create the HTTP client for a single verification."""
        options: dict[str, Any] = {
            "headers": {"User-Agent": self.settings.user_agent},
            "verify": self.settings.verify_ssl,
        }
        if self.settings.timeout is not None:
            options["timeout"] = self.settings.timeout
        if self._transport is not None:
            options["transport"] = self._transport
        return httpx.Client(**options)

    def verify(
        self, factor: Factor, request: FactorVerificationRequest
    ) -> LoginResponse:
        """Verify a factor with the given request.

        Args:
            factor: Factor to verify, as decoded from the login transaction
            request: Verification payload matching the factor kind

        Returns:
            The login transaction returned by Okta

        Raises:
            UnsupportedVerificationMethodError: If the factor kind cannot be
                verified yet
            IncompatibleVerificationRequestError: If the request shape does
                not match the factor kind
            LinkResolutionError: If the factor has no usable verify link
            OktaAPIError: For transport errors and non-2xx responses
            ResponseDecodeError: If a 2xx body is not a login transaction
        """
        logger.info(
            "Verifying factor",
            factor_id=factor.id,
            factor_type=factor.factor_type,
            provider=factor.provider.value,
        )

        if isinstance(factor, SmsFactor):
            return self._verify_sms(factor, request)
        elif isinstance(factor, UNSUPPORTED_FACTORS):
            logger.info(
                "Unsupported verification method", factor_type=factor.factor_type
            )
            raise UnsupportedVerificationMethodError(factor.kind)
        else:
            raise TypeError(f"Unknown factor model: {type(factor).__name__}")

    def _verify_sms(
        self, factor: SmsFactor, request: FactorVerificationRequest
    ) -> LoginResponse:
        if not isinstance(request, SmsVerificationRequest):
            raise IncompatibleVerificationRequestError(
                factor.kind, type(request).__name__
            )

        url = resolve_link(factor.links, LinkRelation.VERIFY)
        return self._post(url, request)

    def _post(self, url: str, request: VerificationRequest) -> LoginResponse:
        """Send a verification payload and decode the login transaction.

        Args:
            url: Resolved verify URL
            request: Verification payload

        Returns:
            Decoded login transaction

        Raises:
            OktaAPIError: For transport errors and non-2xx responses
            ResponseDecodeError: If the body is not a login transaction
        """
        payload = request.to_payload()
        if self.settings.log_requests:
            logger.info(
                "Sending verification request",
                url=url,
                payload=self._mask_sensitive_data(payload),
            )

        try:
            with self._build_client() as client:
                response = client.post(
                    url,
                    json=payload,
                    headers={
                        "Content-Type": ContentType.JSON.value,
                        "Accept": ContentType.JSON.value,
                    },
                )
        except httpx.TimeoutException as e:
            logger.error("Verification request timed out", url=url)
            raise OktaTimeoutError(
                f"Request to {url} timed out", original_error=e
            ) from e
        except httpx.RequestError as e:
            logger.error("Verification request failed", url=url, error=str(e))
            raise OktaConnectionError(f"Request error: {e}", original_error=e) from e

        self._raise_for_status(response)
        return self._decode_login_response(response)

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Map a non-2xx response to the matching API error."""
        if response.is_success:
            return

        status_code = response.status_code
        response_data = self._error_body(response)
        summary = (response_data or {}).get("errorSummary") or response.text

        logger.error(
            "Factor verification failed",
            status_code=status_code,
            error_code=(response_data or {}).get("errorCode"),
        )

        if status_code == 400:
            raise OktaBadRequestError(f"Bad request: {summary}", response_data)
        elif status_code == 401:
            raise OktaAuthenticationError(
                f"Authentication failed: {summary}", response_data
            )
        elif status_code == 403:
            raise OktaForbiddenError(f"Forbidden: {summary}", response_data)
        elif status_code == 429:
            raise OktaRateLimitError(
                "Rate limit exceeded",
                response_data,
                retry_after=self._retry_after(response),
            )
        elif status_code >= 500:
            raise OktaServerError(
                f"Server error: {status_code}",
                status_code=status_code,
                response_data=response_data,
            )
        raise OktaAPIError(
            f"HTTP error: {status_code}",
            status_code=status_code,
            response_data=response_data,
        )

    def _decode_login_response(self, response: httpx.Response) -> LoginResponse:
        try:
            data = response.json()
        except ValueError as e:
            logger.error("Response body is not JSON", status_code=response.status_code)
            raise ResponseDecodeError(
                "Response body is not valid JSON", body=response.text
            ) from e

        if self.settings.log_responses:
            logger.info(
                "Received verification response",
                status_code=response.status_code,
                body=self._mask_sensitive_data(data),
            )

        if not isinstance(data, dict):
            logger.error("Response body is not a JSON object")
            raise ResponseDecodeError(
                f"Expected a JSON object, got {type(data).__name__}",
                body=response.text,
            )

        try:
            return LoginResponse.model_validate(data)
        except ValidationError as e:
            logger.error("Failed to parse login response", error=str(e))
            raise ResponseDecodeError(
                f"Invalid response format: {e}", body=response.text
            ) from e

    @staticmethod
    def _error_body(response: httpx.Response) -> dict[str, Any] | None:
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    @staticmethod
    def _retry_after(response: httpx.Response) -> int | None:
        value = response.headers.get("Retry-After")
        if value is None or not value.isdigit():
            return None
        return int(value)

    def _mask_sensitive_data(self, data: Any) -> Any:
        """Mask secrets in a payload before it is logged.

        Args:
            data: JSON-like payload

        Returns:
            A copy with sensitive values masked, or the data unchanged when
            masking is disabled
        """
        if not self.settings.mask_sensitive_data:
            return data

        if isinstance(data, dict):
            return {
                key: MASKED_VALUE
                if key in SENSITIVE_FIELDS
                else self._mask_sensitive_data(value)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [self._mask_sensitive_data(item) for item in data]
        return data


def verify_factor(
    factor: Factor,
    request: FactorVerificationRequest,
    settings: OktaSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> LoginResponse:
    """Verify a factor with a one-off client.

    Args:
        factor: Factor to verify
        request: Verification payload matching the factor kind
        settings: Optional settings override
        transport: Optional httpx transport

    Returns:
        The login transaction returned by Okta
    """
    client = OktaFactorClient(settings=settings, transport=transport)
    return client.verify(factor, request)
