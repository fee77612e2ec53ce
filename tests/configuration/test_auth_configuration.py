"""Tests for the configuration composer."""

import copy

import pytest

from neo_auth.core.exceptions import StructuralValidationError
from neo_auth.configuration import (
    AuthConfiguration,
    CommonOptions,
    PassportStrategy,
    TokenGateResolver,
    Web2Options,
    Web3Options,
)
from neo_auth.twilio import TwilioOptions, TwilioSecrets


class TestAuthConfiguration:
    """Test cascading construction of the root configuration."""

    def test_from_dict(self, sample_configuration_data):
        config = AuthConfiguration.from_dict(sample_configuration_data)

        assert config.enabled is True
        assert isinstance(config.common_options, CommonOptions)
        assert isinstance(config.web2_options, Web2Options)
        assert isinstance(config.web3_options, Web3Options)
        assert config.common_options.passport is PassportStrategy.REDIS
        assert config.common_options.app_name == "neo-auth-test"
        assert config.token_gate_enabled
        assert config.two_factor_enabled

    def test_round_trip(self, sample_configuration_data):
        assert AuthConfiguration.from_dict(sample_configuration_data).to_dict() == sample_configuration_data

    def test_idempotent(self, sample_configuration_data):
        first = AuthConfiguration.from_dict(copy.deepcopy(sample_configuration_data))
        second = AuthConfiguration.from_dict(copy.deepcopy(sample_configuration_data))
        assert first == second

    def test_enabled_must_be_boolean(self, sample_configuration_data):
        sample_configuration_data["enabled"] = "yes"
        with pytest.raises(StructuralValidationError, match="enabled must be a boolean"):
            AuthConfiguration.from_dict(sample_configuration_data)

    @pytest.mark.parametrize("section", ["commonOptions", "web2Options", "web3Options"])
    def test_sections_must_be_objects(self, sample_configuration_data, section):
        sample_configuration_data[section] = None
        with pytest.raises(StructuralValidationError, match=f"{section} must be a non-null object"):
            AuthConfiguration.from_dict(sample_configuration_data)

    def test_nested_errors_propagate(self, sample_configuration_data):
        sample_configuration_data["web3Options"]["tokenGateOptions"]["roles"] = []
        with pytest.raises(StructuralValidationError, match="^roles must be a non-empty array$"):
            AuthConfiguration.from_dict(sample_configuration_data)

    def test_token_gate_resolver(self, sample_configuration_data, sample_wallet):
        resolver = AuthConfiguration.from_dict(sample_configuration_data).token_gate_resolver()

        assert isinstance(resolver, TokenGateResolver)
        assert resolver.resolve_roles(sample_wallet) == ("member",)

    def test_disabled_configuration_disables_features(self, sample_configuration_data):
        sample_configuration_data["enabled"] = False
        config = AuthConfiguration.from_dict(sample_configuration_data)

        assert not config.token_gate_enabled
        assert not config.two_factor_enabled

    def test_options_are_read_only(self, sample_configuration_data):
        config = AuthConfiguration.from_dict(sample_configuration_data)
        with pytest.raises(TypeError):
            config.common_options.redis["host"] = "elsewhere"


class TestCommonOptions:
    """Test options shared by both credential families."""

    def test_unknown_passport_rejected(self, sample_configuration_data):
        common = sample_configuration_data["commonOptions"]
        common["passport"] = "session"
        with pytest.raises(StructuralValidationError, match="passport must be one of: redis, jwt"):
            CommonOptions.from_dict(common)

    def test_jwt_strategy(self, sample_configuration_data):
        common = sample_configuration_data["commonOptions"]
        common["passport"] = "jwt"
        assert CommonOptions.from_dict(common).uses_jwt_sessions

    def test_app_name_required(self, sample_configuration_data):
        common = sample_configuration_data["commonOptions"]
        common["appName"] = "  "
        with pytest.raises(StructuralValidationError, match="appName must be a non-empty string"):
            CommonOptions.from_dict(common)

    @pytest.mark.parametrize("field", ["redis", "jwt", "cookieOptions", "operator"])
    def test_settings_must_be_objects(self, sample_configuration_data, field):
        common = sample_configuration_data["commonOptions"]
        common[field] = "not-an-object"
        with pytest.raises(StructuralValidationError, match=f"{field} must be a non-null object"):
            CommonOptions.from_dict(common)


class TestWeb2Options:
    """Test traditional credential configuration."""

    def test_mail_templates(self, sample_configuration_data):
        options = Web2Options.from_dict(sample_configuration_data["web2Options"])

        assert options.confirm_mail["template"] == "confirm"
        assert options.reset_mail["template"] == "reset"
        assert options.twilio_options.twilio_secrets.service_sid == "VA123"

    @pytest.mark.parametrize("kind", ["confirm", "reset"])
    def test_send_mail_options_need_both_kinds(self, sample_configuration_data, kind):
        web2 = sample_configuration_data["web2Options"]
        del web2["sendMailOptions"][kind]
        with pytest.raises(
            StructuralValidationError, match="sendMailOptions must contain confirm and reset properties"
        ):
            Web2Options.from_dict(web2)

    def test_empty_mail_template_settings_accepted(self, sample_configuration_data):
        web2 = sample_configuration_data["web2Options"]
        web2["sendMailOptions"]["confirm"] = {}

        assert dict(Web2Options.from_dict(web2).confirm_mail) == {}

    def test_mail_template_settings_must_be_objects(self, sample_configuration_data):
        web2 = sample_configuration_data["web2Options"]
        web2["sendMailOptions"]["reset"] = "reset.html"
        with pytest.raises(StructuralValidationError, match="sendMailOptions.reset must be a non-null object"):
            Web2Options.from_dict(web2)

    def test_flags_must_be_boolean(self, sample_configuration_data):
        web2 = sample_configuration_data["web2Options"]
        web2["admin_only"] = 0
        with pytest.raises(StructuralValidationError, match="admin_only must be a boolean"):
            Web2Options.from_dict(web2)

    def test_twilio_secrets_validated(self, sample_configuration_data):
        web2 = sample_configuration_data["web2Options"]
        web2["twilioOptions"]["twilioSecrets"]["accountSid"] = ""
        with pytest.raises(StructuralValidationError, match="accountSid must be a non-empty string"):
            Web2Options.from_dict(web2)

    def test_twilio_options_instance_required(self, sample_configuration_data):
        web2 = sample_configuration_data["web2Options"]
        with pytest.raises(StructuralValidationError, match="twilioOptions must be an instance of TwilioOptions"):
            Web2Options(
                confirmation_required=True,
                admin_only=False,
                send_mail_options=web2["sendMailOptions"],
                mailer_options={},
                twilio_options=web2["twilioOptions"],
            )


class TestWeb3Options:
    """Test wallet credential configuration."""

    def test_token_gate_options_required(self):
        with pytest.raises(StructuralValidationError, match="tokenGateOptions must be a non-null object"):
            Web3Options.from_dict({})


class TestTwilio:
    """Test Twilio secrets and options."""

    def test_secrets_positional(self):
        secrets = TwilioSecrets("AC123", "token", "VA123")
        assert (secrets.account_sid, secrets.auth_token, secrets.service_sid) == ("AC123", "token", "VA123")

    @pytest.mark.parametrize(
        "args, field",
        [
            (("", "token", "service"), "accountSid"),
            (("AC123", "", "service"), "authToken"),
            (("AC123", "token", ""), "serviceSid"),
        ],
    )
    def test_empty_secret_rejected(self, args, field):
        with pytest.raises(StructuralValidationError, match=f"{field} must be a non-empty string"):
            TwilioSecrets(*args)

    def test_auth_token_masked(self):
        secrets = TwilioSecrets("AC123", "twilio-auth-token-0123456789", "VA123")
        assert "twilio-auth-token-0123456789" not in repr(secrets)

    def test_options_enabled_must_be_boolean(self):
        with pytest.raises(StructuralValidationError, match="enabled must be a boolean"):
            TwilioOptions(twilio_secrets=TwilioSecrets("AC123", "token", "VA123"), enabled=None)
