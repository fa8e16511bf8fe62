"""Load OpenAPI documents and enumerate their parameters.

Only inline parameters are materialized; `$ref` entries are not resolved and
are yielded as wrappers without a parameter.
"""

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from oaslint.models.parameter import Parameter, ParameterWrapper

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def load_document(path: str | Path) -> dict[str, Any]:
    """Read a JSON or YAML OpenAPI document.

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document cannot be parsed or is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Specification not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            document = json.loads(text)
        else:
            document = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to parse specification {path}: {e}") from e

    if not isinstance(document, dict):
        raise ValueError(f"Specification {path} must contain a mapping at the top level")
    return document


def _wrap(raw: Any, path: str, method: str | None) -> ParameterWrapper | None:
    if not isinstance(raw, dict):
        logger.warning(f"Skipping non-object parameter under {path}")
        return None
    if "$ref" in raw:
        logger.debug(f"Unresolved parameter reference {raw['$ref']} under {path}")
        return ParameterWrapper(None, path, method)
    try:
        return ParameterWrapper(Parameter.model_validate(raw), path, method)
    except ValidationError as e:
        logger.warning(f"Skipping malformed parameter under {path}: {e.error_count()} error(s)")
        return None


def iter_parameters(document: dict[str, Any]) -> Iterator[ParameterWrapper]:
    """Yield every path-level and operation-level parameter in document order."""
    paths = document.get("paths") or {}
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        for raw in path_item.get("parameters") or []:
            wrapper = _wrap(raw, path, None)
            if wrapper is not None:
                yield wrapper

        for method, operation in path_item.items():
            if method not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            for raw in operation.get("parameters") or []:
                wrapper = _wrap(raw, path, method)
                if wrapper is not None:
                    yield wrapper
