"""Pydantic data models for oaslint subjects."""

from oaslint.models.parameter import Parameter, ParameterLocation, ParameterWrapper

__all__ = [
    "Parameter",
    "ParameterLocation",
    "ParameterWrapper",
]
