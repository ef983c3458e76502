"""Redis resource spec and the JSON Schema for its input payload."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict

_INT = {"type": ["integer", "null"]}
_STR = {"type": ["string", "null"]}

REDIS_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "inputs": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "guid": _STR,
                    "provider_params": _STR,
                    "zone_id": _INT,
                    "type_id": _INT,
                    "mem_size": _INT,
                    "goods_num": _INT,
                    "period": _INT,
                    "password": _STR,
                    "billing_mode": _INT,
                    "vpc_id": _STR,
                    "subnet_id": _STR,
                    "instance_id": _STR,
                },
            },
        }
    },
}


@dataclass
class RedisInput:
    """One requested Redis instance (or instance to clear)."""

    guid: str = ""
    provider_params: str = field(default="", repr=False)  # Never log credentials
    zone_id: int = 0
    type_id: int = 0
    mem_size: int = 0
    goods_num: int = 0
    period: int = 0
    password: str = field(default="", repr=False)  # Never log password
    billing_mode: int = 0
    vpc_id: str = ""
    subnet_id: str = ""
    instance_id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RedisInput":
        """Build from a decoded payload item; unknown keys and nulls are ignored."""
        kwargs = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            kwargs[f.name] = int(value) if f.type is int else value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
