"""oaslint - Rule-based style checks for OpenAPI specification elements.

oaslint runs a configurable, ordered set of independent rules against API
specification elements (request parameters) and reports pass/fail verdicts
with human-readable diagnostics.
"""

__version__ = "0.1.0"
__description__ = "Rule-based style checks for OpenAPI specification elements"

from oaslint.config import OaslintConfig, RuleConfiguration

__all__ = [
    "__version__",
    "__description__",
    "OaslintConfig",
    "RuleConfiguration",
]
