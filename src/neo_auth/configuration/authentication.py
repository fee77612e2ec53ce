"""Root authentication configuration."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..core.validation import require_bool, require_instance, require_mapping
from .options import CommonOptions
from .web2.options import Web2Options
from .web3.options import Web3Options
from .web3.token_gate.resolver import ActivePredicate, TokenGateResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthConfiguration:
    """Validated configuration of the whole authentication service.

    Handles ONLY configuration shape. Built once at process start;
    performs no network or storage I/O.
    """

    enabled: bool
    common_options: CommonOptions
    web2_options: Web2Options
    web3_options: Web3Options

    def __post_init__(self) -> None:
        require_bool(self.enabled, "enabled")
        require_instance(self.common_options, CommonOptions, "commonOptions")
        require_instance(self.web2_options, Web2Options, "web2Options")
        require_instance(self.web3_options, Web3Options, "web3Options")

    @property
    def token_gate_enabled(self) -> bool:
        return self.enabled and self.web3_options.token_gate_options.enabled

    @property
    def two_factor_enabled(self) -> bool:
        return self.enabled and self.web2_options.twilio_options.enabled

    def token_gate_resolver(
        self, is_active: Optional[ActivePredicate] = None
    ) -> TokenGateResolver:
        """Build a resolver over the configured token gate."""
        return TokenGateResolver(self.web3_options.token_gate_options, is_active=is_active)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthConfiguration":
        """Build the configuration, validating every nested object.

        Args:
            data: Configuration document using the wire field names

        Returns:
            Fully validated configuration

        Raises:
            StructuralValidationError: If any nested field is invalid
        """
        data = require_mapping(data, "configuration")
        configuration = cls(
            enabled=data.get("enabled"),
            common_options=CommonOptions.from_dict(data.get("commonOptions")),
            web2_options=Web2Options.from_dict(data.get("web2Options")),
            web3_options=Web3Options.from_dict(data.get("web3Options")),
        )
        logger.info(
            f"Authentication configuration assembled for {configuration.common_options.app_name} "
            f"(passport={configuration.common_options.passport.value}, "
            f"token_gate={configuration.token_gate_enabled}, "
            f"two_factor={configuration.two_factor_enabled})"
        )
        return configuration

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "commonOptions": self.common_options.to_dict(),
            "web2Options": self.web2_options.to_dict(),
            "web3Options": self.web3_options.to_dict(),
        }
