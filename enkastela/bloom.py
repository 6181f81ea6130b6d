"""Bloom filter blind indexes for partial and substring search.

Text is normalized, split into character n-grams, and each n-gram is
HMAC'd with a secret key to set bits in a Bloom filter. A query filter
matches a document filter when every bit it sets is also set in the
document (false positives are possible; n-gram frequencies leak).
"""

from __future__ import annotations

import hashlib
import hmac
import struct
from dataclasses import dataclass

from .normalize import normalize_for_blind_index

_U64_MASK = (1 << 64) - 1


@dataclass
class BloomConfig:
    """Parameters for Bloom filter generation."""

    filter_bits: int = 256
    num_hashes: int = 3
    ngram_size: int = 3


class BloomFilter:
    """A fixed-size bit vector (little-endian bit order within each byte)."""

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("number of bits must not be negative")
        self.num_bits = num_bits
        self.bits = bytearray((num_bits + 7) // 8)

    def _set_bit(self, pos: int) -> None:
        pos %= self.num_bits
        self.bits[pos // 8] |= 1 << (pos % 8)

    def get_bit(self, pos: int) -> bool:
        """Return whether the bit at ``pos`` (taken modulo the size) is set."""
        pos %= self.num_bits
        return (self.bits[pos // 8] >> (pos % 8)) & 1 == 1

    def contains(self, other: BloomFilter) -> bool:
        """Return whether every bit set in ``other`` is also set in this filter."""
        if self.num_bits != other.num_bits:
            return False
        return all(b & ~a & 0xFF == 0 for a, b in zip(self.bits, other.bits))

    def popcount(self) -> int:
        """Return the number of set bits."""
        return sum(bin(b).count("1") for b in self.bits)

    def to_bytes(self) -> bytes:
        """Serialize as ``num_bits`` (4 bytes, big-endian) followed by the bit data."""
        return struct.pack(">I", self.num_bits) + bytes(self.bits)

    @classmethod
    def from_bytes(cls, data: bytes) -> BloomFilter:
        """Deserialize a filter written by :meth:`to_bytes`.

        Raises ValueError if the data is truncated or its length does not
        match the declared number of bits.
        """
        if len(data) < 4:
            raise ValueError("bloom filter data is shorter than its header")
        (num_bits,) = struct.unpack(">I", data[:4])
        expected = (num_bits + 7) // 8
        if len(data) != 4 + expected:
            raise ValueError(
                f"bloom filter data has {len(data) - 4} bytes, expected {expected}"
            )
        flt = cls(num_bits)
        flt.bits = bytearray(data[4:])
        return flt

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return self.num_bits == other.num_bits and self.bits == other.bits

    def __hash__(self) -> int:
        return hash((self.num_bits, bytes(self.bits)))

    def __repr__(self) -> str:
        return f"BloomFilter(num_bits={self.num_bits}, bits={bytes(self.bits).hex()})"


def extract_ngrams(text: str, n: int) -> list[str]:
    """Return the character n-grams of ``text``.

    Text shorter than ``n`` yields itself as the single n-gram; an empty
    text or ``n == 0`` yields nothing.
    """
    if n == 0 or not text:
        return []
    if len(text) < n:
        return [text]
    return [text[i : i + n] for i in range(len(text) - n + 1)]


def _hash_ngram(key: bytes, ngram: str, k: int, m: int) -> list[int]:
    tag = hmac.new(bytes(key), b"bloom:ngram:" + ngram.encode("utf-8"), hashlib.sha256).digest()
    h1, h2 = struct.unpack(">II", tag[:8])
    return [((h1 + i * h2) & _U64_MASK) % m for i in range(k)]


def compute_bloom_filter(key: bytes, text: str, config: BloomConfig) -> BloomFilter:
    """Build the Bloom filter of ``text`` keyed by ``key``."""
    normalized = normalize_for_blind_index(text)
    flt = BloomFilter(config.filter_bits)
    for ngram in extract_ngrams(normalized, config.ngram_size):
        for pos in _hash_ngram(key, ngram, config.num_hashes, config.filter_bits):
            flt._set_bit(pos)
    return flt


def compute_query_filter(key: bytes, query: str, config: BloomConfig) -> BloomFilter:
    """Build the Bloom filter for a search term."""
    return compute_bloom_filter(key, query, config)


def bloom_search(document: BloomFilter, query: BloomFilter) -> bool:
    """Return whether ``document`` probably contains ``query``."""
    return document.contains(query)