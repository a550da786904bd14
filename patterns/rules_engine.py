"""Pure-function rules engine pattern.

Rules are stateless functions: (value, limits) -> RuleResult.
No database, no side effects, no I/O. This makes them:
- Trivially testable (pure input/output)
- Composable (chain multiple rules)
- Auditable (deterministic, explainable)

The generic field checks here are the building blocks that verticals
combine into their own named rule sets.
"""

from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    field_name: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0


# ---------------------------------------------------------------------------
# Generic field rules
# ---------------------------------------------------------------------------

def check_required(field_name: str, value: str | None, rule_name: str = "required") -> RuleResult:
    """Check that a string field is present and not blank."""
    passed = bool(value and value.strip())

    return RuleResult(
        passed=passed,
        rule_name=rule_name,
        field_name=field_name,
        message=f"{field_name} is present" if passed else f"{field_name} is required",
    )


def check_max_length(
    field_name: str,
    value: str | None,
    max_length: int,
    rule_name: str = "max_length",
) -> RuleResult:
    """Check that a string field does not exceed ``max_length`` characters.

    A missing value has length zero and always passes.
    """
    length = len(value or "")
    passed = length <= max_length

    return RuleResult(
        passed=passed,
        rule_name=rule_name,
        field_name=field_name,
        message=(
            f"{field_name} length {length} within {max_length}"
            if passed
            else f"{field_name} must be at most {max_length} characters (got {length})"
        ),
        details={"length": length, "max_length": max_length},
    )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(
            check_required("name", payload.name),
            check_max_length("name", payload.name, 100),
        )
        if not result.all_passed:
            reject(result.failed)
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )
