"""Data exchanged with the engine API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_UDS = "/var/run/pulsar.sock"


def _require_str(data: Mapping[str, Any], key: str) -> str:
    try:
        value = data[key]
    except (KeyError, TypeError):
        raise ValueError(f"missing field `{key}`") from None
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


@dataclass
class ConfigKV:
    """A single configuration key and its value."""

    key: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConfigKV:
        """Build from decoded JSON, raising ValueError on bad input."""
        return cls(key=_require_str(data, "key"), value=_require_str(data, "value"))


@dataclass
class ModuleConfigKVs:
    """The configuration of one module."""

    module: str
    config: list[ConfigKV] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"module": self.module, "config": [kv.to_dict() for kv in self.config]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModuleConfigKVs:
        """Build from decoded JSON, raising ValueError on bad input."""
        module = _require_str(data, "module")
        try:
            entries = data["config"]
        except KeyError:
            raise ValueError("missing field `config`") from None
        if not isinstance(entries, list):
            raise ValueError("field `config` must be a list")
        return cls(module=module, config=[ConfigKV.from_dict(e) for e in entries])