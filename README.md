# enkastela

Building blocks for application-level field encryption. Sensitive values are
encrypted before they reach the database, and this package supplies the parts
around that encryption:

- **Blind-index normalisation.** Text is put into one canonical form so that
  equivalent inputs index the same way.
- **Bloom-filter search.** Bloom filters built from HMAC-SHA256'd n-grams allow
  partial-match search over encrypted text.
- **Access policies.** Per-role rules say who may encrypt and who may decrypt
  each `(table, column)` field.
- **Compliance reports** for SOC 2, GDPR and HIPAA, with JSON output.
- **Stored ciphertext values.** A wrapper for ciphertext kept in TEXT columns
  as `ek:` followed by base64.
- **Configuration defaults** for a vault.

The package uses only the Python standard library and runs on Python 3.10 or
later.

## Installation

```
pip install enkastela
```

To install the test dependencies as well:

```
pip install "enkastela[test]"
```

## Usage

### Normalising text for blind indexes

`normalize_for_blind_index` applies Unicode NFC, strips surrounding whitespace
and lowercases the text.

```python
from enkastela.normalize import normalize_for_blind_index

assert normalize_for_blind_index("  Alice@Example.COM ") == "alice@example.com"
assert normalize_for_blind_index("caf\u0065\u0301") == "caf\u00e9"
```

### Searching encrypted text with Bloom filters

`compute_bloom_filter` normalises the text, splits it into character n-grams
(see `extract_ngrams`) and sets `num_hashes` bits per n-gram, derived from an
HMAC-SHA256 of the n-gram under the given key. `bloom_search(document, query)`
is true when every bit set in the query filter is also set in the document
filter.

```python
import secrets

from enkastela.bloom import (
    BloomConfig,
    BloomFilter,
    bloom_search,
    compute_bloom_filter,
    compute_query_filter,
)

key = secrets.token_bytes(32)
config = BloomConfig()  # filter_bits=256, num_hashes=3, ngram_size=3

document = compute_bloom_filter(key, "alice@example.com", config)
query = compute_query_filter(key, "example.com", config)
assert bloom_search(document, query)

stored = document.to_bytes()  # 4-byte big-endian bit count, then the bits
assert BloomFilter.from_bytes(stored) == document
```

`BloomFilter.from_bytes` raises `ValueError` when the data is truncated or its
length does not match the declared number of bits. `popcount()` returns the
number of set bits and `get_bit(pos)` reads one bit.

A Bloom filter reveals how often n-grams occur and can report false positives.
A larger filter lowers the false-positive rate.

### Access control

```python
from enkastela.policy import AccessPolicy, Permission

policy = AccessPolicy()
policy.grant("support", "users", "name", Permission.DECRYPT)
policy.grant("support", "users", "email", Permission.FULL)
policy.grant_admin("superadmin")

assert policy.can_decrypt("support", "users", "name")
assert not policy.can_encrypt("support", "users", "name")
assert not policy.can_decrypt("support", "users", "ssn")
assert policy.can_encrypt("superadmin", "any_table", "any_column")

print(policy.decryptable_fields("support"))  # FieldId entries for name and email
```

Role, table and column names are compared case-insensitively. `FULL` grants
both encryption and decryption; `DENY` grants neither. A later grant for the
same role and field replaces the earlier one.

`AccessContext` carries the caller's identity. It is immutable, and its
`with_caller` and `with_reason` methods return updated copies:

```python
from enkastela.context import AccessContext

ctx = AccessContext("support").with_caller("agent-42").with_reason("ticket 456")
assert ctx.role == "support" and ctx.caller_id == "agent-42"
```

### Compliance reports

```python
from enkastela.report import ComplianceReport, ReportConfig, Standard, generate_report

report = generate_report(Standard.GDPR, ReportConfig())
print(str(report.standard))  # "GDPR"
print(report.summary)        # counts of implemented, partial and not implemented controls

text = report.to_json()
restored = ComplianceReport.from_json(text)
assert restored.summary == report.summary
```

Each control carries a `ControlStatus`: `implemented()`, `partial(reason)` or
`not_implemented()`. `ReportConfig` says which features are switched on
(`audit_enabled`, `rotation_configured`, `tls_enforced`, `crypto_shredding`,
`fips_mode`, `access_control`), and the generated controls reflect those
settings. `ComplianceReport.from_json` raises `ValueError` for malformed input.

### Stored ciphertext

```python
from enkastela.encrypted import Encrypted, InvalidBase64Error, InvalidPrefixError

value = Encrypted.from_encoded_string("ek:AQIDBAU=")
assert value.ciphertext == b"\x01\x02\x03\x04\x05"
assert value.to_encoded_string() == "ek:AQIDBAU="
print(value)  # Encrypted(<5 bytes>)

for bad in ("invalid:abc", "ek:!@#$%not-base64"):
    try:
        Encrypted.from_encoded_string(bad)
    except (InvalidPrefixError, InvalidBase64Error) as exc:
        print(exc)
```

Both errors derive from `EncryptedError`, which is a `ValueError`. The text
form of an `Encrypted` shows only the length of the ciphertext, never its
content.

### Configuration defaults

`enkastela.config.EnkastelaConfig` is a dataclass with these defaults:

| Field | Default |
| --- | --- |
| `database_url` | `None` |
| `require_tls` | `True` |
| `auto_migrate` | `True` |
| `cache_ttl` | 5 minutes (`timedelta`) |
| `cache_max_entries` | `1000` |
| `audit_enabled` | `True` |
| `schema` | `"enkastela"` |
| `max_payload_size` | 16 MiB |

## What this package does not do

- It does not encrypt or decrypt field values. It has no cipher, key
  derivation or key management; `Encrypted` only carries and encodes
  ciphertext produced elsewhere.
- It has no database connection. `EnkastelaConfig` only holds settings.
- It has no audit trail: it does not record, chain or verify audit events,
  even though the compliance reports describe audit controls.
- It has no command-line tool.

## Running the tests

```
pip install "enkastela[test]"
pytest
```