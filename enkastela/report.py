"""Compliance reports for SOC 2, GDPR and HIPAA.

Maps the library's encryption controls to the requirements of each
framework and summarises how many are implemented.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

_LIBRARY_VERSION = "0.1.0"

_IMPLEMENTED = "implemented"
_PARTIAL = "partial"
_NOT_IMPLEMENTED = "not_implemented"


class Standard(Enum):
    """Supported compliance standards."""

    SOC2 = "SOC2"
    GDPR = "GDPR"
    HIPAA = "HIPAA"

    def __str__(self) -> str:
        return _STANDARD_NAMES[self]


_STANDARD_NAMES = {
    Standard.SOC2: "SOC 2 Type II",
    Standard.GDPR: "GDPR",
    Standard.HIPAA: "HIPAA",
}


@dataclass(frozen=True)
class ControlStatus:
    """Implementation status of a control; a partial status carries a reason."""

    kind: str
    reason: Optional[str] = None

    @classmethod
    def implemented(cls) -> ControlStatus:
        """The control is fully implemented and active."""
        return cls(_IMPLEMENTED)

    @classmethod
    def partial(cls, reason: str) -> ControlStatus:
        """The control is partially implemented, for the given reason."""
        return cls(_PARTIAL, reason)

    @classmethod
    def not_implemented(cls) -> ControlStatus:
        """The control is not implemented."""
        return cls(_NOT_IMPLEMENTED)

    @property
    def is_implemented(self) -> bool:
        return self.kind == _IMPLEMENTED

    @property
    def is_partial(self) -> bool:
        return self.kind == _PARTIAL

    @property
    def is_not_implemented(self) -> bool:
        return self.kind == _NOT_IMPLEMENTED

    def _to_json_value(self) -> Any:
        if self.kind == _IMPLEMENTED:
            return "Implemented"
        if self.kind == _PARTIAL:
            return {"Partial": self.reason}
        return "NotImplemented"

    @classmethod
    def _from_json_value(cls, value: Any) -> ControlStatus:
        if value == "Implemented":
            return cls.implemented()
        if value == "NotImplemented":
            return cls.not_implemented()
        if isinstance(value, dict) and set(value) == {"Partial"} and isinstance(value["Partial"], str):
            return cls.partial(value["Partial"])
        raise ValueError(f"invalid control status: {value!r}")


@dataclass
class ControlMapping:
    """One framework control and how the library satisfies it."""

    control_id: str
    description: str
    enkastela_implementation: str
    status: ControlStatus

    def _to_dict(self) -> dict[str, Any]:
        return {
            "control_id": self.control_id,
            "description": self.description,
            "enkastela_implementation": self.enkastela_implementation,
            "status": self.status._to_json_value(),
        }

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> ControlMapping:
        return cls(
            control_id=str(data["control_id"]),
            description=str(data["description"]),
            enkastela_implementation=str(data["enkastela_implementation"]),
            status=ControlStatus._from_json_value(data["status"]),
        )


@dataclass
class ReportSummary:
    """Counts of controls by implementation status."""

    total_controls: int
    implemented: int
    partial: int
    not_implemented: int


@dataclass
class ComplianceReport:
    """A complete report against one standard."""

    standard: Standard
    generated_at: str
    enkastela_version: str
    controls: list[ControlMapping] = field(default_factory=list)
    summary: ReportSummary = field(default_factory=lambda: ReportSummary(0, 0, 0, 0))

    def to_dict(self) -> dict[str, Any]:
        """Return the report as JSON-compatible data."""
        return {
            "standard": self.standard.value,
            "generated_at": self.generated_at,
            "enkastela_version": self.enkastela_version,
            "controls": [c._to_dict() for c in self.controls],
            "summary": {
                "total_controls": self.summary.total_controls,
                "implemented": self.summary.implemented,
                "partial": self.summary.partial,
                "not_implemented": self.summary.not_implemented,
            },
        }

    def to_json(self) -> str:
        """Return the report as pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> ComplianceReport:
        """Parse a report written by :meth:`to_json`.

        Raises ValueError if the text is not a well-formed report.
        """
        try:
            data = json.loads(text)
            summary = data["summary"]
            return cls(
                standard=Standard(data["standard"]),
                generated_at=str(data["generated_at"]),
                enkastela_version=str(data["enkastela_version"]),
                controls=[ControlMapping._from_dict(c) for c in data["controls"]],
                summary=ReportSummary(
                    total_controls=int(summary["total_controls"]),
                    implemented=int(summary["implemented"]),
                    partial=int(summary["partial"]),
                    not_implemented=int(summary["not_implemented"]),
                ),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed compliance report: {exc}") from exc


@dataclass
class ReportConfig:
    """Which features are enabled, as input to report generation."""

    audit_enabled: bool = True
    rotation_configured: bool = False
    tls_enforced: bool = True
    crypto_shredding: bool = True
    fips_mode: bool = False
    access_control: bool = False


def generate_report(standard: Standard, config: ReportConfig) -> ComplianceReport:
    """Generate a compliance report for ``standard`` under ``config``."""
    controls = _GENERATORS[standard](config)
    summary = ReportSummary(
        total_controls=len(controls),
        implemented=sum(1 for c in controls if c.status.is_implemented),
        partial=sum(1 for c in controls if c.status.is_partial),
        not_implemented=sum(1 for c in controls if c.status.is_not_implemented),
    )
    return ComplianceReport(
        standard=standard,
        generated_at=datetime.now(timezone.utc).isoformat(),
        enkastela_version=_LIBRARY_VERSION,
        controls=controls,
        summary=summary,
    )


def _soc2_controls(config: ReportConfig) -> list[ControlMapping]:
    return [
        ControlMapping(
            "CC6.1",
            "Logical and physical access controls",
            "Field-level encryption with AES-256-GCM ensures data is protected at rest. "
            "Each field is independently encrypted with unique DEKs.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "CC6.6",
            "Encryption of data in transit and at rest",
            "TLS enforced for database connections. AES-256-GCM for data at rest."
            if config.tls_enforced
            else "AES-256-GCM for data at rest. TLS not enforced.",
            ControlStatus.implemented()
            if config.tls_enforced
            else ControlStatus.partial("TLS not enforced for database connections"),
        ),
        ControlMapping(
            "CC6.7",
            "Encryption key management",
            "HKDF-SHA256 key derivation with per-table DEKs. AES-256 key wrapping. "
            "Optional cloud KMS integration.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "CC7.2",
            "Monitoring of system components",
            "HMAC-chained audit trail for all encrypt/decrypt operations."
            if config.audit_enabled
            else "Audit logging available but not enabled.",
            ControlStatus.implemented()
            if config.audit_enabled
            else ControlStatus.partial("Audit logging not enabled"),
        ),
        ControlMapping(
            "CC8.1",
            "Change management",
            "Key version tracking with rotation support. "
            "Old versions remain accessible for decryption.",
            ControlStatus.implemented()
            if config.rotation_configured
            else ControlStatus.partial("Key rotation not configured"),
        ),
    ]


def _gdpr_controls(config: ReportConfig) -> list[ControlMapping]:
    return [
        ControlMapping(
            "Art. 5(1)(f)",
            "Integrity and confidentiality",
            "AES-256-GCM authenticated encryption with AAD binding prevents "
            "unauthorized access and tampering.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "Art. 17",
            "Right to erasure (right to be forgotten)",
            "Crypto-shredding: destroy tenant key to make all encrypted data irrecoverable. "
            "Erasure receipt with cryptographic proof."
            if config.crypto_shredding
            else "Crypto-shredding available but not configured.",
            ControlStatus.implemented()
            if config.crypto_shredding
            else ControlStatus.partial("Crypto-shredding not configured"),
        ),
        ControlMapping(
            "Art. 20",
            "Right to data portability",
            "GDPR export module generates structured JSON with all encrypted fields "
            "decrypted for the data subject.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "Art. 25",
            "Data protection by design and by default",
            "Encryption is applied at the field level by default. "
            "Blind indexes enable search without exposing plaintext.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "Art. 32",
            "Security of processing",
            "AES-256-GCM (NIST-approved), HKDF-SHA256 key derivation, "
            "constant-time comparisons, automatic key zeroization.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "Art. 33",
            "Notification of breach to supervisory authority",
            "Tamper-evident audit trail with HMAC chain integrity verification. "
            "Intrusion detection via poison records."
            if config.audit_enabled
            else "Audit logging available but not enabled.",
            ControlStatus.implemented()
            if config.audit_enabled
            else ControlStatus.partial("Audit logging not enabled"),
        ),
    ]


def _hipaa_controls(config: ReportConfig) -> list[ControlMapping]:
    return [
        ControlMapping(
            "§164.312(a)(2)(iv)",
            "Encryption and decryption",
            "AES-256-GCM via FIPS-140-2 validated backend (aws-lc-rs)."
            if config.fips_mode
            else "AES-256-GCM via audited RustCrypto. FIPS mode available but not active.",
            ControlStatus.implemented()
            if config.fips_mode
            else ControlStatus.partial("FIPS-140 mode not active"),
        ),
        ControlMapping(
            "§164.312(b)",
            "Audit controls",
            "Comprehensive audit trail with HMAC integrity chain for all encryption operations."
            if config.audit_enabled
            else "Audit capability available but not enabled.",
            ControlStatus.implemented()
            if config.audit_enabled
            else ControlStatus.not_implemented(),
        ),
        ControlMapping(
            "§164.312(c)(1)",
            "Integrity",
            "AES-256-GCM provides authenticated encryption — "
            "any tampering is detected during decryption.",
            ControlStatus.implemented(),
        ),
        ControlMapping(
            "§164.312(d)",
            "Person or entity authentication",
            "Field-level access control with role-based permissions."
            if config.access_control
            else "Access control available but not configured.",
            ControlStatus.implemented()
            if config.access_control
            else ControlStatus.partial("Access control not configured"),
        ),
        ControlMapping(
            "§164.312(e)(1)",
            "Transmission security",
            "TLS required for all database connections."
            if config.tls_enforced
            else "TLS available but not enforced.",
            ControlStatus.implemented()
            if config.tls_enforced
            else ControlStatus.partial("TLS not enforced"),
        ),
    ]


_GENERATORS = {
    Standard.SOC2: _soc2_controls,
    Standard.GDPR: _gdpr_controls,
    Standard.HIPAA: _hipaa_controls,
}