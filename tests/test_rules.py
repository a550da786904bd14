"""Test task validation rules."""
import pytest
from patterns.rules_engine import check_max_length, check_required, evaluate_rules
from verticals.todo.config import ValidationConfig
from verticals.todo.errors import TaskValidationError
from verticals.todo.models.schemas import TaskIn
from verticals.todo.rules import (
    desc_max_length,
    evaluate_task,
    name_max_length,
    name_required,
    validate_task,
)


def test_check_required():
    assert check_required("name", "x").passed
    assert not check_required("name", "").passed
    assert not check_required("name", "   ").passed
    assert not check_required("name", None).passed


def test_check_max_length_details():
    result = check_max_length("name", "abcd", 3)
    assert not result.passed
    assert result.details == {"length": 4, "max_length": 3}
    assert "at most 3" in result.message


def test_evaluate_rules_collects_failures():
    result = evaluate_rules(
        check_required("a", "ok"),
        check_required("b", ""),
        check_max_length("c", "xx", 1),
    )
    assert not result.all_passed
    assert [r.field_name for r in result.failed] == ["b", "c"]


def test_empty_name_rejected():
    assert not name_required(TaskIn(name="")).passed


def test_name_100_chars_accepted():
    assert name_max_length(TaskIn(name="a" * 100), ValidationConfig()).passed


def test_name_101_chars_rejected():
    result = name_max_length(TaskIn(name="a" * 101), ValidationConfig())
    assert not result.passed
    assert result.rule_name == "name_max_length"


def test_desc_limit():
    limits = ValidationConfig()
    assert desc_max_length(TaskIn(name="x", desc="d" * 1000), limits).passed
    assert not desc_max_length(TaskIn(name="x", desc="d" * 1001), limits).passed


def test_desc_optional():
    assert evaluate_task(TaskIn(name="Buy milk")).all_passed


def test_custom_limits():
    limits = ValidationConfig(name_max_length=5)
    assert not evaluate_task(TaskIn(name="toolong"), limits).all_passed


def test_validate_task_passes_silently():
    validate_task(TaskIn(name="Buy milk", desc="2 litres"))


def test_validate_task_lists_every_violation():
    with pytest.raises(TaskValidationError) as exc_info:
        validate_task(TaskIn(name="", desc="d" * 1001))
    violations = exc_info.value.violations
    assert {(v.field, v.rule) for v in violations} == {
        ("name", "name_required"),
        ("desc", "desc_max_length"),
    }
