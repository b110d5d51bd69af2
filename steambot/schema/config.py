"""Bot configuration read from ``config.yaml``."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class RateLimitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    requests_per_second: Annotated[int, Field(gt=0)] = 1
    burst: Annotated[int, Field(ge=1)] = 5


class HttpConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timeout: Annotated[float, Field(gt=0)] = 30.0


class BotConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rate_limit: RateLimitConfig = RateLimitConfig()
    http: HttpConfig = HttpConfig()


def _merge(target: dict[str, Any], source: dict[str, Any], key: str) -> None:
    for name, value in source.items():
        if name not in target:
            target[name] = value
            continue
        existing = target[name]
        if isinstance(existing, dict) and isinstance(value, dict):
            _merge(existing, value, key)
        elif isinstance(existing, dict) or isinstance(value, dict):
            raise ValueError(f"'{key}' conflicts with scalar '{name}'")
        else:
            raise ValueError(f"duplicate configuration key '{key}'")


def expand_dotted_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Expand flat ``section.key: value`` entries into nested mappings.

    ``{"rate_limit.burst": 5}`` becomes ``{"rate_limit": {"burst": 5}}``. Flat
    and nested forms may be mixed. Setting the same scalar twice, in either
    form, is an error.
    """
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = expand_dotted_keys(value)
        parts = str(key).split(".")
        for part in reversed(parts[1:]):
            value = {part: value}
        _merge(result, {parts[0]: value}, str(key))
    return result
