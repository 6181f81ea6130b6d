"""Encrypted column values as stored in the database.

A value is kept as raw wire-format ciphertext and stored in a TEXT column
as ``ek:`` followed by its standard base64 encoding. Encryption and
decryption happen elsewhere; this type only carries and encodes the bytes.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

ENKASTELA_PREFIX = "ek:"


class EncryptedError(ValueError):
    """An encoded encrypted value could not be parsed."""


class InvalidPrefixError(EncryptedError):
    """The encoded value does not start with the ``ek:`` prefix."""

    def __init__(self) -> None:
        super().__init__("missing 'ek:' prefix")


class InvalidBase64Error(EncryptedError):
    """The encoded value is not valid base64 after the prefix."""

    def __init__(self) -> None:
        super().__init__("invalid base64 encoding")


@dataclass(frozen=True, repr=False)
class Encrypted:
    """Raw ciphertext bytes of an encrypted field.

    Its text form never shows the ciphertext, only its length.
    """

    ciphertext: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "ciphertext", bytes(self.ciphertext))

    def to_encoded_string(self) -> str:
        """Return ``ek:`` followed by the base64 encoding of the ciphertext."""
        return ENKASTELA_PREFIX + base64.b64encode(self.ciphertext).decode("ascii")

    @classmethod
    def from_encoded_string(cls, text: str) -> Encrypted:
        """Parse a value written by :meth:`to_encoded_string`.

        Raises InvalidPrefixError if the prefix is missing and
        InvalidBase64Error if the rest is not valid base64.
        """
        if not text.startswith(ENKASTELA_PREFIX):
            raise InvalidPrefixError()
        encoded = text[len(ENKASTELA_PREFIX):]
        try:
            ciphertext = base64.b64decode(encoded.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError):
            raise InvalidBase64Error() from None
        return cls(ciphertext)

    def __bytes__(self) -> bytes:
        return self.ciphertext

    def __len__(self) -> int:
        return len(self.ciphertext)

    def __repr__(self) -> str:
        return f"Encrypted(<{len(self.ciphertext)} bytes>)"

    __str__ = __repr__