"""Field encryption building blocks: blind-index normalisation, Bloom-filter search, access policies, compliance reports and stored ciphertext values."""

__version__ = "0.1.0"