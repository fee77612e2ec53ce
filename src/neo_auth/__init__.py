"""Neo-Auth - validated domain core for the NeoMultiTenant authentication service.

This library provides the immutable credential, handshake, second-factor
and token-gate types the authentication service is built on, together with
the configuration composer that wires them up at startup.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .core.exceptions import (
    NeoAuthError,
    ConfigurationError,
    StructuralValidationError,
    InvalidStateTransitionError,
    get_http_status_code,
    create_error_response,
)

from .credentials import (
    Operator,
    OperatorNft,
    UserType,
    UserTag,
    UserIdentity,
    LoginCredentials,
    SignupCredentials,
    LoginResponse,
    LogoutResponse,
    WalletIdentity,
    AuthToken,
    HandshakePayload,
    SignedData,
    Authenticate,
    SignedPayload,
    SignInSignedData,
    Login,
    WalletLoginResponse,
)

from .twilio import TwilioSecrets, TwilioOptions

from .two_factor import (
    SecondFactorStatus,
    CreateResponse,
    VerifyResponse,
    DeleteResponse,
    SecurityCode,
    SecondFactorState,
)

from .configuration import (
    AuthConfiguration,
    CommonOptions,
    PassportStrategy,
    Web2Options,
    Web3Options,
    SubscriptionPlan,
    SubscriptionPeriodicity,
    TokenGateProperties,
    TokenGateMetadata,
    TokenGateEntity,
    TokenGateRole,
    TokenGateOptions,
    TokenGateResolver,
    TokenGrant,
    subscription_filter,
)

from .config import (
    AuthSettings,
    get_settings,
    override_settings,
    reset_settings,
    load_auth_configuration,
)

__all__ = [
    "__version__",

    # Errors
    "NeoAuthError",
    "ConfigurationError",
    "StructuralValidationError",
    "InvalidStateTransitionError",
    "get_http_status_code",
    "create_error_response",

    # Credentials
    "Operator",
    "OperatorNft",
    "UserType",
    "UserTag",
    "UserIdentity",
    "LoginCredentials",
    "SignupCredentials",
    "LoginResponse",
    "LogoutResponse",
    "WalletIdentity",
    "AuthToken",
    "HandshakePayload",
    "SignedData",
    "Authenticate",
    "SignedPayload",
    "SignInSignedData",
    "Login",
    "WalletLoginResponse",

    # Second factor
    "TwilioSecrets",
    "TwilioOptions",
    "SecondFactorStatus",
    "CreateResponse",
    "VerifyResponse",
    "DeleteResponse",
    "SecurityCode",
    "SecondFactorState",

    # Configuration
    "AuthConfiguration",
    "CommonOptions",
    "PassportStrategy",
    "Web2Options",
    "Web3Options",
    "SubscriptionPlan",
    "SubscriptionPeriodicity",
    "TokenGateProperties",
    "TokenGateMetadata",
    "TokenGateEntity",
    "TokenGateRole",
    "TokenGateOptions",
    "TokenGateResolver",
    "TokenGrant",
    "subscription_filter",

    # Settings
    "AuthSettings",
    "get_settings",
    "override_settings",
    "reset_settings",
    "load_auth_configuration",
]
