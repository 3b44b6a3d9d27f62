"""
Environment variable normalization — Copado payloads to plain dicts.

Copado delivers variables as ``[{"name": ..., "value": ...}]`` lists,
or grouped per parent record as
``[{"id": ..., "environmentVariables": [...]}]``, sometimes encoded as a
JSON string.  Everything here turns those into ``{name: value}`` dicts.

All functions are pure except :func:`convert_env_variables`, which
rewrites the mapping it is given.  None and "" are returned unchanged.
Duplicate names resolve to the last occurrence.  A mapping passed in
again is treated as already converted.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from mcdev_copado.core.config.loader import ConfigError
from mcdev_copado.core.models.env_vars import EnvChildVar, EnvVar, SourceProperty

# Keys with this suffix hold grouped (per-record) variables
CHILDREN_SUFFIX = "Children"

_ENV_VARS = TypeAdapter(list[EnvVar])
_ENV_CHILD_VARS = TypeAdapter(list[EnvChildVar])
_SOURCE_PROPERTIES = TypeAdapter(list[SourceProperty])


def _parse(adapter: TypeAdapter, value: Any) -> list:
    """Validate a JSON string or an already-decoded structure."""
    try:
        if isinstance(value, (str, bytes)):
            return adapter.validate_json(value)
        return adapter.validate_python(value)
    except ValidationError as e:
        raise ConfigError(f"Invalid environment variable payload: {e}") from e


def convert_env_vars(env_vars: Any) -> Any:
    """Convert ``{name, value}`` entries into ``{name: value}``."""
    if env_vars is None or env_vars == "":
        return env_vars
    if isinstance(env_vars, Mapping):
        return dict(env_vars)

    return {item.name: item.value for item in _parse(_ENV_VARS, env_vars)}


def convert_env_child_vars(env_child_vars: Any) -> Any:
    """Convert ``{id, environmentVariables}`` entries into ``{id: {name: value}}``."""
    if env_child_vars is None or env_child_vars == "":
        return env_child_vars
    if isinstance(env_child_vars, Mapping):
        return {key: convert_env_vars(value) for key, value in env_child_vars.items()}

    return {
        item.id: convert_env_vars(item.environment_variables)
        for item in _parse(_ENV_CHILD_VARS, env_child_vars)
    }


def convert_env_variables(env_variables: MutableMapping[str, Any]) -> None:
    """Normalize every entry of ``env_variables`` in place.

    Keys ending in ``Children`` hold grouped variables; all other keys
    hold flat variable lists.
    """
    for key in list(env_variables):
        if key.endswith(CHILDREN_SUFFIX):
            env_variables[key] = convert_env_child_vars(env_variables[key])
        else:
            env_variables[key] = convert_env_vars(env_variables[key])


def convert_source_properties(properties: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Convert Copado system property records into ``{api_name: value}``."""
    return {prop.api_name: prop.value for prop in _parse(_SOURCE_PROPERTIES, list(properties))}
