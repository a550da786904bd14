"""Todo validation rules: pure functions.

Each rule is named and checks one constraint on a decoded TaskIn. They run
on create and update, after decoding and before the store is touched.
"""

from patterns.rules_engine import (
    RuleResult,
    RuleSetResult,
    check_max_length,
    check_required,
    evaluate_rules,
)
from verticals.todo.config import ValidationConfig
from verticals.todo.errors import TaskValidationError
from verticals.todo.models.schemas import TaskIn, Violation


def name_required(task: TaskIn) -> RuleResult:
    return check_required("name", task.name, rule_name="name_required")


def name_max_length(task: TaskIn, limits: ValidationConfig) -> RuleResult:
    return check_max_length(
        "name", task.name, limits.name_max_length, rule_name="name_max_length"
    )


def desc_max_length(task: TaskIn, limits: ValidationConfig) -> RuleResult:
    return check_max_length(
        "desc", task.desc, limits.desc_max_length, rule_name="desc_max_length"
    )


def evaluate_task(task: TaskIn, limits: ValidationConfig | None = None) -> RuleSetResult:
    """Run every task rule and return the aggregate result."""
    limits = limits or ValidationConfig()
    return evaluate_rules(
        name_required(task),
        name_max_length(task, limits),
        desc_max_length(task, limits),
    )


def validate_task(task: TaskIn, limits: ValidationConfig | None = None) -> None:
    """Raise TaskValidationError listing every failed rule, if any."""
    result = evaluate_task(task, limits)
    if result.all_passed:
        return
    raise TaskValidationError([
        Violation(field=r.field_name or "", rule=r.rule_name, message=r.message)
        for r in result.failed
    ])
