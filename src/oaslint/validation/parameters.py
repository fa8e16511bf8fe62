"""Rules and recommendations for OpenAPI parameters."""

from ..config import RuleConfiguration
from ..models.parameter import ParameterLocation, ParameterWrapper
from .framework import (
    Fail,
    Pass,
    Result,
    RuleRegistration,
    ValidationRule,
    Validator,
    build_validator,
    recommendation,
)

APACHE_NGINX_UNDERSCORE_DESCRIPTION = (
    "Apache and Nginx default to legacy CGI behavior in which headers with "
    "underscores are ignored."
)
APACHE_NGINX_UNDERSCORE_FAILURE_MESSAGE = (
    "Header names containing underscores are dropped by default by Apache and "
    "Nginx. Rename the header or allow underscores in the server configuration."
)


def apache_nginx_header_check(wrapper: ParameterWrapper) -> Result:
    """Flag header parameters whose name contains an underscore.

    Returns Pass for anything that is not a header parameter, otherwise
    Fail with details "<name> contains an underscore." when applicable.
    """
    parameter = wrapper.parameter
    if parameter is None or parameter.location != ParameterLocation.HEADER:
        return Pass.empty()

    header_name = parameter.name
    if header_name and "_" in header_name:
        return Fail(f"{header_name} contains an underscore.")
    return Pass.empty()


PARAMETER_RULES: tuple[RuleRegistration[ParameterWrapper], ...] = (
    RuleRegistration(
        recommendation("enableApacheNginxUnderscoreRecommendation"),
        ValidationRule.warn(
            APACHE_NGINX_UNDERSCORE_DESCRIPTION,
            APACHE_NGINX_UNDERSCORE_FAILURE_MESSAGE,
            apache_nginx_header_check,
        ),
    ),
)


def parameter_validator(config: RuleConfiguration) -> Validator[ParameterWrapper]:
    """Build the validator applied to every parameter of a document."""
    return build_validator(config, PARAMETER_RULES)
