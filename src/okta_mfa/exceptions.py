"""Custom exception classes for Okta factor verification."""

from typing import Any


class OktaMfaError(Exception):
    """Base exception for all factor verification errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Decode errors


class FactorDecodeError(OktaMfaError):
    """Raised when a factor payload cannot be decoded."""

    def __init__(
        self,
        message: str = "Invalid factor payload",
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.payload = payload


class UnknownFactorTypeError(FactorDecodeError):
    """Raised when ``factorType`` is missing or not a known factor kind."""

    def __init__(
        self,
        factor_type: Any,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Unknown factor type: {factor_type!r}", payload=payload)
        self.factor_type = factor_type


# Protocol-shape errors


class LinkResolutionError(OktaMfaError):
    """Raised when a hypermedia relation cannot be resolved to a URL."""

    def __init__(self, message: str, relation: str) -> None:
        super().__init__(message)
        self.relation = relation


class MissingLinkRelationError(LinkResolutionError):
    """The relation is not present on the resource's links."""

    def __init__(self, relation: str) -> None:
        super().__init__(f"Link relation '{relation}' not found", relation)


class EmptyLinkCollectionError(LinkResolutionError):
    """The relation maps to a link collection with no entries."""

    def __init__(self, relation: str) -> None:
        super().__init__(f"Link relation '{relation}' has no links", relation)


# Verification method errors


class UnsupportedVerificationMethodError(OktaMfaError):
    """Raised when a factor kind has no verification path."""

    def __init__(self, factor_type: Any) -> None:
        value = getattr(factor_type, "value", factor_type)
        super().__init__(f"Unsupported MFA method: {value}")
        self.factor_type = factor_type


class InvalidVerificationRequestError(OktaMfaError):
    """Raised when a verification request cannot be built from the given input."""


class IncompatibleVerificationRequestError(InvalidVerificationRequestError):
    """Raised when a request shape does not match the factor being verified."""

    def __init__(self, factor_type: Any, request_type: str) -> None:
        value = getattr(factor_type, "value", factor_type)
        super().__init__(
            f"{request_type} cannot be used to verify a '{value}' factor"
        )
        self.factor_type = factor_type
        self.request_type = request_type


# Transport / HTTP errors


class OktaAPIError(OktaMfaError):
    """Base exception for transport and HTTP errors from the Okta API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize OktaAPIError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
            response_data: Decoded error body from the API, if any
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data

    @property
    def error_code(self) -> str | None:
        """Okta ``errorCode`` from the response body (e.g. ``E0000068``)."""
        if self.response_data:
            return self.response_data.get("errorCode")
        return None

    @property
    def error_summary(self) -> str | None:
        """Okta ``errorSummary`` from the response body."""
        if self.response_data:
            return self.response_data.get("errorSummary")
        return None

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"Okta API Error ({self.status_code}): {self.message}"
        return f"Okta API Error: {self.message}"


class OktaBadRequestError(OktaAPIError):
    """Exception raised for bad request errors (400)."""

    def __init__(
        self,
        message: str = "Bad request - invalid pass code or malformed payload",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=400, response_data=response_data)


class OktaAuthenticationError(OktaAPIError):
    """Exception raised for authentication errors (401)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=401, response_data=response_data)


class OktaForbiddenError(OktaAPIError):
    """Exception raised for forbidden errors (403)."""

    def __init__(
        self,
        message: str = "Operation not allowed",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=403, response_data=response_data)


class OktaRateLimitError(OktaAPIError):
    """Exception raised for rate limit errors (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        response_data: dict[str, Any] | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, status_code=429, response_data=response_data)
        self.retry_after = retry_after


class OktaServerError(OktaAPIError):
    """Exception raised for server errors (5xx)."""

    def __init__(
        self,
        message: str = "Internal server error occurred",
        status_code: int = 500,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response_data=response_data)


class OktaTimeoutError(OktaAPIError):
    """Exception raised for request timeout errors."""

    def __init__(
        self,
        message: str = "Request timed out",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class OktaConnectionError(OktaAPIError):
    """Exception raised for connection errors."""

    def __init__(
        self,
        message: str = "Failed to connect to Okta",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


# Response decode errors


class ResponseDecodeError(OktaMfaError):
    """Raised when a successful response body is not a valid login response."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body
