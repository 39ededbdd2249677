"""Tests for EncryptionKey raw serialization and parsing."""

import pytest

from itemencrypt import (
    BadFormatDataError,
    Base64URLDecodeError,
    EncryptionKey,
    Format,
    InitializationVectorSizeError,
    SaltSizeError,
    Scheme,
)

V1 = Scheme.for_format(Format.V1)
V2 = Scheme.for_format(Format.V2)


@pytest.fixture(scope="module")
def v1_key() -> EncryptionKey:
    """A reproducible V1 key."""
    return EncryptionKey.from_seed(
        "  Secret1  ",
        ["alice@example.com"],
        seed=bytes(16),
        iv=bytes(range(16)),
        scheme=V1,
    )


@pytest.fixture(scope="module")
def v2_key() -> EncryptionKey:
    """A random V2 key."""
    return EncryptionKey.from_password("Secret1", ["alice@example.com"], V2)


class TestRawData:
    """Tests for the raw_data layout."""

    def test_layout(self, v1_key: EncryptionKey) -> None:
        """Test that raw_data is version + key + IV + salt."""
        raw = v1_key.raw_data
        assert raw[: Format.DATA_SIZE] == Format.V1.encode()
        assert raw[Format.DATA_SIZE : Format.DATA_SIZE + 32] == v1_key.key_data
        assert raw[-48:-32] == v1_key.initialization_vector
        assert raw[-32:] == v1_key.salt

    def test_length(self, v1_key: EncryptionKey) -> None:
        """Test the serialized length for the V1 scheme."""
        assert len(v1_key.raw_data) == Format.DATA_SIZE + len(v1_key.key_data) + 16 + 32

    def test_context_not_serialized(self, v1_key: EncryptionKey) -> None:
        """Test that labels do not change the serialized bytes."""
        assert v1_key.with_context("alice@example.com").raw_data == v1_key.raw_data

    def test_pure(self, v1_key: EncryptionKey) -> None:
        """Test that raw_data is stable across calls."""
        assert v1_key.raw_data == v1_key.raw_data


class TestRoundTrip:
    """Tests for parsing serialized keys."""

    def test_v1(self, v1_key: EncryptionKey) -> None:
        """Test that a V1 key survives serialization unchanged."""
        parsed = EncryptionKey.from_raw_data(v1_key.raw_data)
        assert parsed == v1_key
        assert hash(parsed) == hash(v1_key)
        assert parsed.key_data == v1_key.key_data

    def test_v2(self, v2_key: EncryptionKey) -> None:
        """Test that a V2 key resolves its own scheme when parsed."""
        parsed = EncryptionKey.from_raw_data(v2_key.raw_data)
        assert parsed.scheme == V2
        assert parsed == v2_key

    def test_labeled_key_loses_context(self, v1_key: EncryptionKey) -> None:
        """Test that a parsed key carries no context."""
        labeled = v1_key.with_context("alice@example.com")
        parsed = EncryptionKey.from_raw_data(labeled.raw_data)
        assert parsed.context is None
        assert parsed != labeled
        assert parsed.with_context("alice@example.com") == labeled

    def test_accepts_bytearray(self, v1_key: EncryptionKey) -> None:
        """Test that mutable buffers parse."""
        assert EncryptionKey.from_raw_data(bytearray(v1_key.raw_data)) == v1_key

    def test_payload_is_not_rederived(self) -> None:
        """Test that arbitrary payload bytes are restored verbatim."""
        payload = b"\x99" * 7
        raw = Format.V1.encode() + payload + b"\x01" * 16 + b"\x02" * 32
        parsed = EncryptionKey.from_raw_data(raw)
        assert parsed.key_data == payload
        assert parsed.initialization_vector == b"\x01" * 16
        assert parsed.salt == b"\x02" * 32
        assert parsed.raw_data == raw

    def test_empty_payload(self) -> None:
        """Test that data with only tag, IV and salt parses to an empty key."""
        raw = Format.V1.encode() + bytes(48)
        assert EncryptionKey.from_raw_data(raw).key_data == b""

    def test_custom_scheme_parses_as_registered(self) -> None:
        """Test that parsing resolves the registered scheme for the tag."""
        cheap = Scheme(
            format=Format.V1,
            hmac_algorithm="sha256",
            seed_size=8,
            initialization_vector_size=16,
            stretched_salt_size=32,
            key_size=16,
            iterations=1000,
        )
        key = EncryptionKey.from_seed("Secret1", seed=bytes(8), iv=bytes(16), scheme=cheap)
        parsed = EncryptionKey.from_raw_data(key.raw_data)
        assert parsed.scheme == V1
        assert parsed.key_data == key.key_data
        assert parsed != key


class TestMalformedData:
    """Tests for rejecting malformed serialized keys."""

    @pytest.mark.parametrize("data", [b"", b"I", b"IE\x00"])
    def test_shorter_than_tag(self, data: bytes) -> None:
        """Test that data shorter than the version tag is rejected."""
        with pytest.raises(BadFormatDataError):
            EncryptionKey.from_raw_data(data)

    @pytest.mark.parametrize("tag", [b"IE\x00\x00", b"IE\x00\x09", b"XXXX", b"\x00\x00\x00\x01"])
    def test_unknown_tag(self, tag: bytes) -> None:
        """Test that unknown version tags are rejected."""
        with pytest.raises(BadFormatDataError):
            EncryptionKey.from_raw_data(tag + bytes(80))

    def test_too_short_for_salt(self) -> None:
        """Test that data too short to hold the salt is rejected."""
        with pytest.raises(SaltSizeError) as exc_info:
            EncryptionKey.from_raw_data(Format.V1.encode() + bytes(10))

        assert exc_info.value.expected == 32
        assert exc_info.value.actual == 10

    def test_too_short_for_iv(self) -> None:
        """Test that data too short to hold the IV is rejected."""
        with pytest.raises(InitializationVectorSizeError) as exc_info:
            EncryptionKey.from_raw_data(Format.V1.encode() + bytes(40))

        assert exc_info.value.expected == 16
        assert exc_info.value.actual == 8

    def test_tag_decides_layout(self, v1_key: EncryptionKey) -> None:
        """Test that component widths come from the tag, not the data length."""
        raw = Format.V2.encode() + v1_key.raw_data[Format.DATA_SIZE :]
        parsed = EncryptionKey.from_raw_data(raw)
        assert parsed.scheme == V2
        assert len(parsed.salt) == 64
        assert len(parsed.initialization_vector) == 12


class TestBase64Url:
    """Tests for the text form of a key."""

    def test_round_trip(self, v1_key: EncryptionKey) -> None:
        """Test that the text form parses back to the same key."""
        assert EncryptionKey.from_base64url(v1_key.to_base64url()) == v1_key

    def test_surrounding_whitespace(self, v1_key: EncryptionKey) -> None:
        """Test that a trailing newline from a file or pipe is tolerated."""
        assert EncryptionKey.from_base64url(v1_key.to_base64url() + "\n") == v1_key

    def test_invalid_text(self) -> None:
        """Test that standard base64 is rejected."""
        with pytest.raises(Base64URLDecodeError):
            EncryptionKey.from_base64url("SUUAAQ==")

    def test_invalid_key_bytes(self) -> None:
        """Test that valid text with an unknown tag is rejected."""
        with pytest.raises(BadFormatDataError):
            EncryptionKey.from_base64url("WFhYWA")


class TestScenario:
    """End-to-end check of derive, serialize and parse."""

    def test_alice(self, v1_key: EncryptionKey) -> None:
        """Test the documented alice@example.com walkthrough."""
        unpadded = EncryptionKey.from_seed(
            "Secret1",
            ["alice@example.com"],
            seed=bytes(16),
            iv=bytes(range(16)),
            scheme=V1,
        )
        assert v1_key == unpadded

        raw = v1_key.raw_data
        assert len(raw) == Format.DATA_SIZE + len(v1_key.key_data) + 16 + 32
        assert EncryptionKey.from_raw_data(raw) == v1_key
