"""Pytest configuration and fixtures for neo-auth tests."""

import pytest

from neo_auth.configuration.web3.token_gate import (
    TokenGateEntity,
    TokenGateMetadata,
    TokenGateOptions,
    TokenGateProperties,
    TokenGateRole,
)
from neo_auth.credentials.operator import Operator, OperatorNft
from neo_auth.credentials.web3 import AuthToken, HandshakePayload, WalletIdentity
from neo_auth.two_factor import CreateResponse


SAMPLE_JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIwLjAuMTIzNDUiLCJub2RlIjoiMC4wLjMifQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)


@pytest.fixture
def sample_jwt():
    """Sample JWT-shaped token string."""
    return SAMPLE_JWT


@pytest.fixture
def sample_user_data():
    """Sample user identity as received on the wire."""
    return {
        "username": "john",
        "email": "john@example.com",
        "created_at": 1700000000,
        "updated_at": 1700000500,
        "type": "web2",
        "tags": [{"key": "plan", "value": "premium"}],
    }


@pytest.fixture
def sample_operator_data():
    """Sample network operator as received on the wire."""
    return {
        "accountId": "0.0.12345",
        "publicKey": "302a300506032b6570032100abcdef",
        "url": "https://node-1.example.com",
        "nft": {"id": "0.0.777", "serialNumber": 3},
    }


@pytest.fixture
def sample_operator():
    """Sample network operator."""
    return Operator(
        account_id="0.0.12345",
        public_key="302a300506032b6570032100abcdef",
        url="https://node-1.example.com",
        nft=OperatorNft(id="0.0.777", serial_number=3),
    )


@pytest.fixture
def sample_payload_data(sample_jwt):
    """Sample handshake payload as received on the wire."""
    return {
        "url": "https://auth.example.com/web3/authenticate",
        "node": "0.0.3",
        "data": {"token": sample_jwt},
    }


@pytest.fixture
def sample_payload(sample_jwt):
    """Sample handshake payload."""
    return HandshakePayload(
        url="https://auth.example.com/web3/authenticate",
        node="0.0.3",
        data=AuthToken(sample_jwt),
    )


@pytest.fixture
def sample_token_entity_data():
    """Sample owned-token record as received on the wire."""
    return {
        "metadata": {
            "name": "Premium Pass",
            "description": "Premium monthly membership",
            "creator": "Neo Labs",
            "image": "ipfs://bafybeigdyrzt",
            "properties": {"plan": "premium", "periodicity": "monthly"},
        },
        "serial_number": 42,
        "token_id": "0.0.1001",
    }


def make_token(token_id, plan="premium", periodicity="monthly", serial_number=1):
    """Build an owned-token record with the given subscription."""
    return TokenGateEntity(
        metadata=TokenGateMetadata(
            name="Membership",
            description="Membership token",
            creator="Neo Labs",
            image="ipfs://membership",
            properties=TokenGateProperties(plan=plan, periodicity=periodicity),
        ),
        serial_number=serial_number,
        token_id=token_id,
    )


@pytest.fixture
def token_factory():
    """Factory for owned-token records."""
    return make_token


@pytest.fixture
def sample_gate_options():
    """Token gate with two rules."""
    return TokenGateOptions(
        enabled=True,
        roles=[
            TokenGateRole(token_id="0.0.1001", role="member"),
            TokenGateRole(token_id="0.0.2002", role="admin"),
        ],
    )


@pytest.fixture
def sample_wallet(token_factory):
    """Wallet owning one token that matches the sample gate."""
    return WalletIdentity(
        wallet_id="0.0.5555",
        public_key="302a300506032b6570032100feed",
        balance=[token_factory("0.0.1001")],
    )


@pytest.fixture
def sample_create_response():
    """Provider response of a successful factor enrollment."""
    return CreateResponse(
        factor_sid="YF1",
        identity="id@x.com",
        uri="otpauth://totp/Neo:id@x.com?secret=SECRET&issuer=Neo",
        secret="SECRET",
        message="ok",
    )


@pytest.fixture
def sample_configuration_data():
    """Complete authentication configuration document."""
    return {
        "enabled": True,
        "commonOptions": {
            "redis": {"host": "localhost", "port": 6379},
            "jwt": {"secret": "dev-secret", "signOptions": {"expiresIn": 3600}},
            "cookieOptions": {"httpOnly": True, "secure": False},
            "operator": {"accountId": "0.0.12345", "privateKey": "302e", "publicKey": "302a"},
            "passport": "redis",
            "appName": "neo-auth-test",
        },
        "web2Options": {
            "confirmation_required": True,
            "admin_only": False,
            "sendMailOptions": {
                "confirm": {"subject": "Please confirm your email", "template": "confirm"},
                "reset": {"subject": "Reset your password", "template": "reset"},
            },
            "mailerOptions": {"transport": {"host": "smtp.example.com"}},
            "twilioOptions": {
                "twilioSecrets": {
                    "accountSid": "AC123",
                    "authToken": "twilio-auth-token-0123456789",
                    "serviceSid": "VA123",
                },
                "enabled": True,
            },
        },
        "web3Options": {
            "tokenGateOptions": {
                "enabled": True,
                "roles": [{"tokenId": "0.0.1001", "role": "member"}],
            },
        },
    }
