"""Validation layer for oaslint.

Pluggable rules assembled from a RuleConfiguration and evaluated by a generic
validator. Adding a rule means adding a registration row, not editing the engine.
"""

from .framework import (
    Fail,
    Pass,
    Result,
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
from .parameters import PARAMETER_RULES, apache_nginx_header_check, parameter_validator

__all__ = [
    "Fail",
    "Pass",
    "Result",
    "RuleOutcome",
    "RuleRegistration",
    "Severity",
    "ValidationResult",
    "ValidationRule",
    "Validator",
    "always",
    "build_validator",
    "recommendation",
    "PARAMETER_RULES",
    "apache_nginx_header_check",
    "parameter_validator",
]
