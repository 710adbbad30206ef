"""Validation configuration constants and policy.

This module centralizes all validation thresholds and institution-specific rules.
Adjust these constants, or pass a ValidationPolicy, to tune validation behavior.

Amounts are in minor currency units (cents) throughout.

Severity Levels:
    - "error": Structural defects that make the file unusable
    - "warning": Advisory findings that never flip validity
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

# ============================================================================
# THRESHOLD CONSTANTS
# ============================================================================

DEFAULT_EXPECTED_CUSTOMERS: Tuple[str, ...] = ("0005157748558",)

MIN_CUSTOMER_ID_LENGTH = 5
MAX_TRANSACTIONS_PER_ACCOUNT = 10_000
LARGE_AMOUNT_THRESHOLD = 100_000_000  # $1,000,000 in cents

# Recommend a data-quality review above this many warnings per transaction
WARNING_RATE_THRESHOLD = 0.1

# Warnings containing this text trigger the customer-list recommendation
CUSTOMER_WARNING_MARKER = "Customer ID"


# ============================================================================
# CUSTOMER RULES
# ============================================================================

MATCH_PREFIX = "prefix"
MATCH_EXACT = "exact"
_MATCH_KINDS = (MATCH_PREFIX, MATCH_EXACT)


@dataclass(frozen=True)
class CustomerRule:
    """Institution-specific recommendation keyed on customer identifiers.

    Attributes:
        match: "prefix" or "exact".
        value: Prefix or full identifier to match.
        message: Recommendation appended when any customer in the file matches.

    Examples:
        >>> rule = CustomerRule(match="prefix", value="144", message="...")
        >>> rule.matches("1440001")
        True
    """

    match: str
    value: str
    message: str

    def __post_init__(self) -> None:
        if self.match not in _MATCH_KINDS:
            raise ValueError(f"Invalid match: {self.match}. Must be 'prefix' or 'exact'.")

    def matches(self, customer_id: str) -> bool:
        if self.match == MATCH_PREFIX:
            return customer_id.startswith(self.value)
        return customer_id == self.value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomerRule":
        missing = [k for k in ("match", "value", "message") if k not in data]
        if missing:
            raise ValueError(f"Customer rule missing fields: {', '.join(missing)}")
        return cls(match=str(data["match"]), value=str(data["value"]), message=str(data["message"]))


DEFAULT_CUSTOMER_RULES: Tuple[CustomerRule, ...] = (
    CustomerRule(
        match=MATCH_PREFIX,
        value="144",
        message="CFOT customer detected - ensure proper processing entity configuration",
    ),
    CustomerRule(
        match=MATCH_EXACT,
        value="0005157748558",
        message="MCF customer detected - standard processing applies",
    ),
)


# ============================================================================
# POLICY
# ============================================================================


def _as_identifiers(value: Any) -> FrozenSet[str]:
    if isinstance(value, str):
        return frozenset([value])
    return frozenset(str(v) for v in value)


@dataclass(frozen=True)
class ValidationPolicy:
    """Typed validation options.

    Attributes:
        expected_customers: Accepted customer identifiers.
        allow_unknown_customers: Skip the unknown-customer warning entirely.
        min_customer_id_length: Shorter identifiers get a warning.
        max_transactions_per_account: More transactions than this get a warning.
        large_amount_threshold: Absolute amounts above this get a warning.
        warning_rate_threshold: Warnings-per-transaction ratio that triggers a
            data-quality recommendation.
        customer_warning_marker: Warning text that triggers the customer-list
            recommendation.
        customer_rules: Ordered institution-specific recommendation rules.
    """

    expected_customers: FrozenSet[str] = frozenset(DEFAULT_EXPECTED_CUSTOMERS)
    allow_unknown_customers: bool = False
    min_customer_id_length: int = MIN_CUSTOMER_ID_LENGTH
    max_transactions_per_account: int = MAX_TRANSACTIONS_PER_ACCOUNT
    large_amount_threshold: int = LARGE_AMOUNT_THRESHOLD
    warning_rate_threshold: float = WARNING_RATE_THRESHOLD
    customer_warning_marker: str = CUSTOMER_WARNING_MARKER
    customer_rules: Tuple[CustomerRule, ...] = DEFAULT_CUSTOMER_RULES

    def __post_init__(self) -> None:
        for name in (
            "min_customer_id_length",
            "max_transactions_per_account",
            "large_amount_threshold",
            "warning_rate_threshold",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    def replace(self, **changes: Any) -> "ValidationPolicy":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_options(
        cls, options: Optional[Mapping[str, Any]], base: Optional["ValidationPolicy"] = None
    ) -> "ValidationPolicy":
        """Build a policy from a mapping of options.

        Recognized keys are the field names of this class. Unknown keys are
        ignored (logged at DEBUG) so newer callers can pass options older
        engines do not know about.

        Args:
            options: Mapping of option names to values, or None for defaults.
            base: Policy supplying values for keys not present in ``options``.

        Returns:
            New ValidationPolicy.

        Examples:
            >>> policy = ValidationPolicy.from_options({"allow_unknown_customers": True})
            >>> policy.allow_unknown_customers
            True
        """
        policy = base or cls()
        if not options:
            return policy

        known = {f.name for f in dataclasses.fields(cls)}
        changes = {}
        for key, value in options.items():
            if key not in known:
                logger.debug("Ignoring unknown validation option: %s", key)
                continue
            if value is None:
                continue
            if key == "expected_customers":
                value = _as_identifiers(value)
            elif key == "customer_rules":
                value = _as_rules(value)
            changes[key] = value
        return dataclasses.replace(policy, **changes)


def _as_rules(value: Iterable[Any]) -> Tuple[CustomerRule, ...]:
    return tuple(r if isinstance(r, CustomerRule) else CustomerRule.from_dict(r) for r in value)


def load_policy(policy_file: Path) -> ValidationPolicy:
    """Load a validation policy from a YAML file.

    The document is a mapping using ValidationPolicy field names, e.g.:

        expected_customers: ["0005157748558", "0001112223334"]
        allow_unknown_customers: false
        customer_rules:
          - {match: prefix, value: "144", message: "CFOT customer detected"}

    Args:
        policy_file: Path to the YAML file.

    Returns:
        ValidationPolicy with defaults for keys absent from the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or is not a mapping.
    """
    if not policy_file.exists():
        raise FileNotFoundError(f"Policy file not found: {policy_file}")
    try:
        with policy_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read policy file {policy_file}: {e}") from e
    if not isinstance(data, Mapping):
        raise ValueError(f"Policy file {policy_file} must contain a mapping")
    return ValidationPolicy.from_options(data)
