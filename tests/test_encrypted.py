import pytest

from enkastela.encrypted import (
    Encrypted,
    EncryptedError,
    InvalidBase64Error,
    InvalidPrefixError,
)


def test_roundtrip_encoding():
    original = bytes([1, 2, 3, 4, 5])
    enc = Encrypted(original)
    encoded = enc.to_encoded_string()
    assert encoded.startswith("ek:")
    decoded = Encrypted.from_encoded_string(encoded)
    assert decoded.ciphertext == original


def test_roundtrip_other_data():
    data = bytes([10, 20, 30, 40])
    decoded = Encrypted.from_encoded_string(Encrypted(data).to_encoded_string())
    assert decoded.ciphertext == data


def test_known_encoding():
    assert Encrypted(b"\x01\x02\x03").to_encoded_string() == "ek:AQID"


def test_empty_ciphertext_roundtrip():
    enc = Encrypted(b"")
    assert enc.to_encoded_string() == "ek:"
    assert Encrypted.from_encoded_string("ek:").ciphertext == b""


def test_list_input_converted_to_bytes():
    assert Encrypted([1, 2, 3]).ciphertext == b"\x01\x02\x03"


def test_invalid_prefix():
    with pytest.raises(InvalidPrefixError) as info:
        Encrypted.from_encoded_string("invalid:abc")
    assert str(info.value) == "missing 'ek:' prefix"


def test_invalid_base64():
    with pytest.raises(InvalidBase64Error) as info:
        Encrypted.from_encoded_string("ek:!@#$%not-base64")
    assert str(info.value) == "invalid base64 encoding"


def test_errors_share_base_class():
    with pytest.raises(EncryptedError):
        Encrypted.from_encoded_string("nope")
    with pytest.raises(ValueError):
        Encrypted.from_encoded_string("ek:***")


def test_display():
    enc = Encrypted(bytes(16))
    assert str(enc) == "Encrypted(<16 bytes>)"


def test_debug_hides_data():
    enc = Encrypted(bytes(32))
    text = repr(enc)
    assert "32 bytes" in text
    assert "\0" not in text
    assert repr(Encrypted(bytes(48))) == "Encrypted(<48 bytes>)"


def test_copy_equal():
    a = Encrypted(bytes([1, 2, 3]))
    b = Encrypted(bytes(a))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Encrypted(bytes([1, 2, 4]))


def test_into_ciphertext():
    original = bytes([10, 20, 30])
    enc = Encrypted(original)
    assert bytes(enc) == original
    assert len(enc) == 3