"""Tests for the leaf validators."""

import math
from types import MappingProxyType

import pytest

from neo_auth.core.encoding import canonical_json
from neo_auth.core.exceptions import StructuralValidationError
from neo_auth.core.validation import (
    coerce_bytes,
    mask_secret,
    require_absolute_url,
    require_bool,
    require_bytes,
    require_email,
    require_enum,
    require_mapping,
    require_non_empty_sequence_of,
    require_non_empty_string,
    require_non_negative_int,
    require_number,
    require_positive_int,
)
from neo_auth.credentials.user import UserType


class TestStringsAndNumbers:
    """Test primitive validators."""

    @pytest.mark.parametrize("value", ["", "   ", None, 5])
    def test_non_empty_string_rejects(self, value):
        with pytest.raises(StructuralValidationError, match="^username must be a non-empty string$"):
            require_non_empty_string(value, "username")

    def test_bool_rejects_integers(self):
        with pytest.raises(StructuralValidationError, match="enabled must be a boolean"):
            require_bool(1, "enabled")
        assert require_bool(False, "enabled") is False

    @pytest.mark.parametrize("value", [0, -1, True, 1.5, "3"])
    def test_positive_int_rejects(self, value):
        with pytest.raises(StructuralValidationError, match="must be a positive integer"):
            require_positive_int(value, "created_at")

    def test_non_negative_int_accepts_zero(self):
        assert require_non_negative_int(0, "code_2fa") == 0
        with pytest.raises(StructuralValidationError):
            require_non_negative_int(-1, "code_2fa")

    def test_number_rejects_nan_and_bool(self):
        with pytest.raises(StructuralValidationError, match="must be a valid number"):
            require_number(math.nan, "serial_number")
        with pytest.raises(StructuralValidationError):
            require_number(True, "serial_number")
        assert require_number(2.5, "serial_number") == 2.5


class TestStructures:
    """Test mapping, sequence and byte validators."""

    def test_mapping_returns_read_only_copy(self):
        source = {"host": "localhost"}
        result = require_mapping(source, "redis")

        assert isinstance(result, MappingProxyType)
        source["host"] = "changed"
        assert result["host"] == "localhost"
        with pytest.raises(TypeError):
            result["host"] = "other"

    def test_mapping_rejects_none(self):
        with pytest.raises(StructuralValidationError, match="redis must be a non-null object"):
            require_mapping(None, "redis")

    def test_non_empty_sequence(self):
        with pytest.raises(StructuralValidationError, match="roles must be a non-empty array"):
            require_non_empty_sequence_of([], str, "roles")
        with pytest.raises(StructuralValidationError, match=r"roles\[1\] must be an instance of str"):
            require_non_empty_sequence_of(["a", 2], str, "roles")
        assert require_non_empty_sequence_of(["a"], str, "roles") == ("a",)

    def test_bytes(self):
        assert require_bytes(bytearray(b"\x01"), "signature") == b"\x01"
        with pytest.raises(StructuralValidationError, match="signature cannot be empty"):
            require_bytes(b"", "signature")
        with pytest.raises(StructuralValidationError, match="signature must be a byte sequence"):
            require_bytes("abc", "signature")

    def test_coerce_bytes_from_int_list(self):
        assert coerce_bytes([1, 2, 255], "signature") == b"\x01\x02\xff"
        with pytest.raises(StructuralValidationError, match="byte values"):
            coerce_bytes([256], "signature")


class TestFormats:
    """Test email, URL and enum formats."""

    def test_email(self):
        assert require_email("john@example.com") == "john@example.com"

    @pytest.mark.parametrize("value", ["john", "john@example", "@example.com", "jo hn@example.com", "john@example.com\n", None])
    def test_email_rejects(self, value):
        with pytest.raises(StructuralValidationError, match="email must match a valid address pattern"):
            require_email(value)

    @pytest.mark.parametrize("value", ["not a url", "/relative/path", "example.com"])
    def test_url_rejects(self, value):
        with pytest.raises(StructuralValidationError, match="url must be a valid absolute URL"):
            require_absolute_url(value)

    def test_url_accepts(self):
        assert require_absolute_url("https://auth.example.com/login")

    def test_enum_lists_allowed_values(self):
        assert require_enum("web3", UserType, "type") is UserType.WALLET
        with pytest.raises(StructuralValidationError, match="type must be one of: web2, web3"):
            require_enum("web4", UserType, "type")


class TestHelpers:
    """Test masking and canonical encoding."""

    def test_mask_secret(self):
        assert mask_secret("short") == "***"
        assert mask_secret("abcdefgh-middle-part-12345678") == "abcdefgh...12345678"

    def test_canonical_json_is_order_independent(self):
        assert canonical_json({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'
        assert canonical_json({"a": 1, "b": 2}) == canonical_json({"b": 2, "a": 1})
