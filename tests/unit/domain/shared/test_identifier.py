"""Unit tests for Identifier value object."""

import uuid

import pytest

from domain.shared.errors import FormatError, InvalidIdentifierFormatError
from domain.shared.value_objects.identifier import Identifier


class TestIdentifier:
    """Test Identifier value object."""

    def test_default_generates_valid_uuid(self):
        """Test that omitting the value generates a UUID."""
        identifier = Identifier()

        uuid.UUID(identifier.value)

    def test_generate_creates_unique_ids(self):
        """Test that generate() creates unique IDs."""
        assert Identifier.generate() != Identifier.generate()

    def test_create_with_valid_uuid_round_trips(self):
        """Test that the wrapped string is returned unchanged."""
        uuid_str = str(uuid.uuid4())
        identifier = Identifier(uuid_str)

        assert identifier.value == uuid_str
        assert str(identifier) == uuid_str

    @pytest.mark.parametrize("value", ["not-a-valid-uuid", "", "1234", 42])
    def test_invalid_value_raises_format_error(self, value):
        """Test that malformed values raise InvalidIdentifierFormatError."""
        with pytest.raises(InvalidIdentifierFormatError) as exc_info:
            Identifier(value)

        assert isinstance(exc_info.value, FormatError)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.value == value

    def test_none_generates_valid_uuid(self):
        """Test that an explicit None generates a UUID."""
        identifier = Identifier(None)

        uuid.UUID(identifier.value)
        assert len(identifier.value) == 36

    @pytest.mark.parametrize(
        "value",
        [
            "e4b8c9d0123456789abcdef012345678",
            "{e4b8c9d0-1234-5678-9abc-def012345678}",
            "urn:uuid:e4b8c9d0-1234-5678-9abc-def012345678",
        ],
    )
    def test_non_canonical_uuid_forms_rejected(self, value):
        """Test that only the hyphenated 8-4-4-4-12 form is accepted."""
        with pytest.raises(InvalidIdentifierFormatError):
            Identifier(value)

    def test_uppercase_uuid_accepted(self):
        """Test that letter case does not matter."""
        uuid_str = "E4B8C9D0-1234-5678-9ABC-DEF012345678"

        assert Identifier(uuid_str).value == uuid_str

    def test_parse_none_generates(self):
        """Test that parse(None) generates a new identifier."""
        identifier = Identifier.parse(None)

        uuid.UUID(identifier.value)

    def test_parse_string(self):
        """Test that parse(str) wraps the string."""
        uuid_str = str(uuid.uuid4())

        assert Identifier.parse(uuid_str) == Identifier(uuid_str)

    def test_equality_and_hash_by_value(self):
        """Test value semantics."""
        uuid_str = str(uuid.uuid4())
        first = Identifier(uuid_str)
        second = Identifier(uuid_str)

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_repr_returns_formatted_string(self):
        """Test that __repr__ returns formatted representation."""
        uuid_str = str(uuid.uuid4())

        assert repr(Identifier(uuid_str)) == f"Identifier('{uuid_str}')"

    def test_immutability(self):
        """Test that Identifier is immutable."""
        identifier = Identifier.generate()

        with pytest.raises(Exception):  # FrozenInstanceError
            identifier.value = str(uuid.uuid4())  # type: ignore
