"""Core validation framework for oaslint.

A validator owns an ordered, immutable tuple of rules selected once from a
RuleConfiguration. Every rule runs against every subject; the engine only
aggregates outcomes and never interprets severities.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, NamedTuple, TypeVar

from ..config import RuleConfiguration

logger = logging.getLogger(__name__)

S = TypeVar("S")


class Severity(str, Enum):
    """How a reporting layer should treat a failed rule."""
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Pass:
    """Rule satisfied. Carries no payload; all instances are equal."""

    @property
    def passed(self) -> bool:
        return True

    @classmethod
    def empty(cls) -> "Pass":
        return _EMPTY_PASS


_EMPTY_PASS = Pass()


@dataclass(frozen=True)
class Fail:
    """Rule violated. `details` is the rendered message, not a template."""
    details: str

    @property
    def passed(self) -> bool:
        return False


Result = Pass | Fail


class RuleOutcome(NamedTuple):
    """One rule evaluated against one subject."""
    description: str
    severity: Severity
    result: Result
    failure_message: str = ""

    @property
    def passed(self) -> bool:
        return self.result.passed

    def __str__(self) -> str:
        if self.passed:
            return f"[PASS] {self.description}"
        return f"[{self.severity.value.upper()}] {self.result.details}"


@dataclass(frozen=True)
class ValidationRule(Generic[S]):
    """A named, severity-tagged check over a subject.

    `check` must be pure and total: inapplicable subjects yield Pass, and
    raising for well-formed input is a defect in the rule.
    """
    description: str
    failure_message: str
    severity: Severity
    check: Callable[[S], Result]

    @classmethod
    def warn(cls, description: str, failure_message: str,
             check: Callable[[S], Result]) -> "ValidationRule[S]":
        """Create an advisory rule."""
        return cls(description, failure_message, Severity.WARN, check)

    @classmethod
    def error(cls, description: str, failure_message: str,
              check: Callable[[S], Result]) -> "ValidationRule[S]":
        """Create a correctness rule."""
        return cls(description, failure_message, Severity.ERROR, check)

    def evaluate(self, subject: S) -> RuleOutcome:
        result = self.check(subject)
        if not isinstance(result, (Pass, Fail)):
            raise TypeError(
                f"Rule '{self.description}' returned {type(result).__name__}, expected Pass or Fail"
            )
        return RuleOutcome(self.description, self.severity, result, self.failure_message)


@dataclass(frozen=True)
class ValidationResult:
    """Ordered outcomes of a single validate() call, passes included."""
    outcomes: tuple[RuleOutcome, ...] = ()

    def __iter__(self):
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    @property
    def failures(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if not o.passed]

    @property
    def warnings(self) -> list[RuleOutcome]:
        return [o for o in self.failures if o.severity == Severity.WARN]

    @property
    def errors(self) -> list[RuleOutcome]:
        return [o for o in self.failures if o.severity == Severity.ERROR]

    @property
    def valid(self) -> bool:
        """True when no ERROR-severity rule failed."""
        return not self.errors

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "outcomes": [
                {
                    "rule": outcome.description,
                    "severity": outcome.severity.value,
                    "passed": outcome.passed,
                    "details": None if outcome.passed else outcome.result.details,
                    "message": None if outcome.passed else outcome.failure_message,
                }
                for outcome in self.outcomes
            ],
        }


class Validator(Generic[S]):
    """Runs a fixed, ordered set of rules against subjects."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[ValidationRule[S]] = ()):
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[ValidationRule[S], ...]:
        return self._rules

    def validate(self, subject: S) -> ValidationResult:
        """Evaluate every rule in registration order.

        Exceptions raised by a rule's check propagate unchanged.
        """
        outcomes = []
        for rule in self._rules:
            outcome = rule.evaluate(subject)
            logger.debug(f"Rule '{rule.description}': {'pass' if outcome.passed else 'fail'}")
            outcomes.append(outcome)
        return ValidationResult(tuple(outcomes))


Predicate = Callable[[RuleConfiguration], bool]


@dataclass(frozen=True)
class RuleRegistration(Generic[S]):
    """Row of a registration table: include `rule` when `enabled(config)` holds."""
    enabled: Predicate
    rule: ValidationRule[S]


def always(config: RuleConfiguration) -> bool:
    """Predicate for rules that cannot be switched off."""
    return True


def recommendation(flag: str) -> Predicate:
    """Predicate for a recommendation gated by the master flag AND `flag`."""
    def enabled(config: RuleConfiguration) -> bool:
        return config.enable_recommendations and config.is_enabled(flag)
    return enabled


def build_validator(config: RuleConfiguration,
                    registrations: Sequence[RuleRegistration[S]]) -> Validator[S]:
    """Assemble a validator from a registration table, preserving table order."""
    rules = [entry.rule for entry in registrations if entry.enabled(config)]
    logger.info(f"Assembled validator with {len(rules)} of {len(registrations)} rules")
    return Validator(rules)
