"""Tests for validation framework core functionality."""

import pytest

from oaslint.config import RuleConfiguration
from oaslint.validation.framework import (
    Fail,
    Pass,
    RuleOutcome,
    RuleRegistration,
    Severity,
    ValidationResult,
    ValidationRule,
    Validator,
    always,
    build_validator,
    recommendation,
)


def _always_pass(subject):
    return Pass.empty()


def _fail_on_odd(subject):
    if subject % 2:
        return Fail(f"{subject} is odd.")
    return Pass.empty()


@pytest.fixture
def odd_rule():
    return ValidationRule.error("Numbers must be even", "Use an even number.", _fail_on_odd)


@pytest.fixture
def registrations(odd_rule):
    """Registration table mixing mandatory and recommendation rules."""
    return (
        RuleRegistration(always, odd_rule),
        RuleRegistration(
            recommendation("enableFirstHint"),
            ValidationRule.warn("First hint", "Hint one.", _always_pass),
        ),
        RuleRegistration(
            recommendation("enableSecondHint"),
            ValidationRule.warn("Second hint", "Hint two.", _fail_on_odd),
        ),
    )


class TestResults:
    """Test Pass and Fail values."""

    def test_pass_instances_are_interchangeable(self):
        assert Pass.empty() is Pass.empty()
        assert Pass() == Pass.empty()
        assert Pass.empty().passed is True

    def test_fail_carries_details(self):
        result = Fail("bad value")
        assert result.passed is False
        assert result.details == "bad value"
        assert result == Fail("bad value")


class TestValidationRule:
    """Test ValidationRule factories and evaluation."""

    def test_warn_factory_sets_severity(self):
        rule = ValidationRule.warn("desc", "message", _always_pass)
        assert rule.severity == Severity.WARN
        assert rule.description == "desc"
        assert rule.failure_message == "message"

    def test_error_factory_sets_severity(self, odd_rule):
        assert odd_rule.severity == Severity.ERROR

    def test_evaluate_returns_outcome(self, odd_rule):
        outcome = odd_rule.evaluate(3)
        assert outcome == RuleOutcome(
            "Numbers must be even", Severity.ERROR, Fail("3 is odd."), "Use an even number."
        )
        assert outcome.passed is False
        assert str(outcome) == "[ERROR] 3 is odd."

    def test_evaluate_rejects_non_result(self):
        rule = ValidationRule.warn("broken", "message", lambda subject: True)
        with pytest.raises(TypeError, match="expected Pass or Fail"):
            rule.evaluate(1)

    def test_rule_is_immutable(self, odd_rule):
        with pytest.raises(AttributeError):
            odd_rule.severity = Severity.WARN


class TestValidationResult:
    """Test ValidationResult aggregation."""

    def test_empty_result_is_valid(self):
        result = ValidationResult()
        assert result.valid is True
        assert len(result) == 0
        assert result.failures == []

    def test_failures_split_by_severity(self):
        result = ValidationResult((
            RuleOutcome("a", Severity.WARN, Fail("warned")),
            RuleOutcome("b", Severity.ERROR, Fail("errored")),
            RuleOutcome("c", Severity.ERROR, Pass.empty()),
        ))

        assert [o.description for o in result.failures] == ["a", "b"]
        assert [o.description for o in result.warnings] == ["a"]
        assert [o.description for o in result.errors] == ["b"]
        assert result.valid is False

    def test_warnings_only_is_valid(self):
        result = ValidationResult((RuleOutcome("a", Severity.WARN, Fail("warned")),))
        assert result.valid is True

    def test_to_dict(self):
        result = ValidationResult((
            RuleOutcome("a", Severity.WARN, Fail("warned"), "Fix it."),
            RuleOutcome("b", Severity.ERROR, Pass.empty(), "Unused."),
        ))

        data = result.to_dict()

        assert data["valid"] is True
        assert data["outcomes"] == [
            {"rule": "a", "severity": "warn", "passed": False, "details": "warned", "message": "Fix it."},
            {"rule": "b", "severity": "error", "passed": True, "details": None, "message": None},
        ]


class TestValidator:
    """Test Validator evaluation semantics."""

    def test_runs_every_rule_in_order(self, odd_rule):
        hint = ValidationRule.warn("hint", "message", _fail_on_odd)
        validator = Validator([odd_rule, hint])

        result = validator.validate(5)

        assert [o.description for o in result] == ["Numbers must be even", "hint"]
        assert all(not o.passed for o in result)

    def test_passes_are_included(self, odd_rule):
        result = Validator([odd_rule]).validate(4)
        assert len(result) == 1
        assert result.outcomes[0].result == Pass.empty()

    def test_rules_are_fixed(self, odd_rule):
        rules = [odd_rule]
        validator = Validator(rules)
        rules.append(odd_rule)

        assert validator.rules == (odd_rule,)
        with pytest.raises(AttributeError):
            validator.rules = ()

    def test_check_exception_propagates(self, odd_rule):
        def broken(subject):
            raise KeyError("boom")

        validator = Validator([ValidationRule.warn("broken", "message", broken), odd_rule])

        with pytest.raises(KeyError):
            validator.validate(1)

    def test_repeated_validation_is_deterministic(self, odd_rule):
        validator = Validator([odd_rule, ValidationRule.warn("hint", "message", _always_pass)])
        assert validator.validate(7) == validator.validate(7)


class TestBuildValidator:
    """Test assembling validators from registration tables."""

    def test_defaults_keep_mandatory_rules_only(self, registrations, odd_rule):
        validator = build_validator(RuleConfiguration(), registrations)
        assert validator.rules == (odd_rule,)

    def test_master_flag_gates_recommendations(self, registrations):
        config = RuleConfiguration(enableRecommendations=False, enableFirstHint=True, enableSecondHint=True)
        validator = build_validator(config, registrations)
        assert [r.description for r in validator.rules] == ["Numbers must be even"]

    def test_specific_flag_required(self, registrations):
        config = RuleConfiguration(enableRecommendations=True, enableSecondHint=True)
        validator = build_validator(config, registrations)
        assert [r.description for r in validator.rules] == ["Numbers must be even", "Second hint"]

    def test_registration_order_preserved(self, registrations):
        config = RuleConfiguration(enableRecommendations=True, enableFirstHint=True, enableSecondHint=True)
        validator = build_validator(config, registrations)
        assert [r.description for r in validator.rules] == [
            "Numbers must be even",
            "First hint",
            "Second hint",
        ]

    def test_recommendation_predicate(self):
        enabled = recommendation("enableFirstHint")
        assert enabled(RuleConfiguration(enableRecommendations=True, enableFirstHint=True)) is True
        assert enabled(RuleConfiguration(enableRecommendations=True)) is False
        assert enabled(RuleConfiguration(enableFirstHint=True)) is False
