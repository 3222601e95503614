"""Shared fixtures and sample Okta payloads."""

import copy

import pytest

from okta_mfa.config import OktaSettings, set_okta_settings

VERIFY_URL = "https://example.okta.com/api/v1/authn/factors/sms193zUBEROPBNZKPPE/verify"


def _links(href: str) -> dict:
    return {
        "verify": {
            "href": href,
            "hints": {"allow": ["POST"]},
        }
    }


# Sample factor payloads, one per factor kind
SAMPLE_FACTORS = {
    "push": {
        "id": "opf3hkfocI4JTLAju0g4",
        "factorType": "push",
        "provider": "OKTA",
        "status": "ACTIVE",
        "_links": _links("https://example.okta.com/api/v1/authn/factors/opf3hkfocI4JTLAju0g4/verify"),
    },
    "sms": {
        "id": "sms193zUBEROPBNZKPPE",
        "factorType": "sms",
        "provider": "OKTA",
        "status": "ACTIVE",
        "profile": {"phoneNumber": "+15551234567"},
        "_links": _links(VERIFY_URL),
    },
    "call": {
        "id": "clf193zUBEROPBNZKPPE",
        "factorType": "call",
        "provider": "OKTA",
        "profile": {"phoneNumber": "+15557654321", "phoneExtension": "1234"},
        "_links": _links("https://example.okta.com/api/v1/authn/factors/clf193zUBEROPBNZKPPE/verify"),
    },
    "token": {
        "id": "ostf1fmaMGJLMNGNLIVG",
        "factorType": "token",
        "provider": "RSA",
        "status": "ACTIVE",
        "profile": {"credentialId": "dade.murphy@example.com"},
        "verify": {"passCode": "5275875498", "nextPassCode": "6829123422"},
        "_links": _links("https://example.okta.com/api/v1/authn/factors/ostf1fmaMGJLMNGNLIVG/verify"),
    },
    "token:software:totp": {
        "id": "ostfm3hPNYSOEDCWGPEJ",
        "factorType": "token:software:totp",
        "provider": "GOOGLE",
        "status": "ACTIVE",
        "profile": {"credentialId": "dade.murphy@example.com"},
        "_links": _links("https://example.okta.com/api/v1/authn/factors/ostfm3hPNYSOEDCWGPEJ/verify"),
    },
    "token:hardware": {
        "id": "ykf1f1m7DlNNfSSAD0g4",
        "factorType": "token:hardware",
        "provider": "YUBICO",
        "status": "ACTIVE",
        "profile": {"credentialId": "000004102994"},
        "_links": _links("https://example.okta.com/api/v1/authn/factors/ykf1f1m7DlNNfSSAD0g4/verify"),
    },
    "question": {
        "id": "ufs1o01OTMGHLAJPVHDZ",
        "factorType": "question",
        "provider": "OKTA",
        "status": "ACTIVE",
        "profile": {
            "question": "disliked_food",
            "questionText": "What is the food you least liked as a child?",
            "answer": "mayonnaise",
        },
        "_links": _links("https://example.okta.com/api/v1/authn/factors/ufs1o01OTMGHLAJPVHDZ/verify"),
    },
    "web": {
        "id": "dsf2ezxgbvTnXW13N0g4",
        "factorType": "web",
        "provider": "DUO",
        "status": "ACTIVE",
        "profile": {"credentialId": "dade.murphy@example.com"},
        "_links": _links("https://example.okta.com/api/v1/authn/factors/dsf2ezxgbvTnXW13N0g4/verify"),
    },
}

SAMPLE_LOGIN_SUCCESS = {
    "expiresAt": "2015-11-03T10:15:57.000Z",
    "status": "SUCCESS",
    "sessionToken": "101W_juydrDRByB7fUdRyE2JQ",
    "_embedded": {
        "user": {
            "id": "00ub0oNGTSWTBKOLGLNR",
            "profile": {
                "login": "dade.murphy@example.com",
                "firstName": "Dade",
                "lastName": "Murphy",
            },
        }
    },
    "_links": {
        "cancel": {
            "href": "https://example.okta.com/api/v1/authn/cancel",
            "hints": {"allow": ["POST"]},
        }
    },
}


@pytest.fixture
def factor_payload():
    """Return a fresh copy of the sample payload for a factor type."""

    def _factor_payload(factor_type: str) -> dict:
        return copy.deepcopy(SAMPLE_FACTORS[factor_type])

    return _factor_payload


@pytest.fixture
def login_success():
    """Successful login transaction body."""
    return copy.deepcopy(SAMPLE_LOGIN_SUCCESS)


@pytest.fixture
def settings():
    """Test settings."""
    return OktaSettings(timeout=5.0, user_agent="okta-mfa-tests")


@pytest.fixture(autouse=True)
def reset_global_settings():
    """Keep the global settings isolated between tests."""
    set_okta_settings(None)
    yield
    set_okta_settings(None)
