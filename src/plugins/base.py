"""
Core plugin types and dataclasses.

This module contains shared types used by every provisioning plugin:
provider parameter bundles, batches of resource specs and the typed
results produced by an action.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Union

from plugins.errors import MalformedInputError

logger = logging.getLogger(__name__)

RawPayload = Union[str, bytes, bytearray, Mapping[str, Any]]

# Keys every provider parameter bundle must carry
PROVIDER_PARAM_REGION = "Region"
PROVIDER_PARAM_SECRET_ID = "SecretID"
PROVIDER_PARAM_SECRET_KEY = "SecretKey"


class BillingMode(IntEnum):
    """Billing mode accepted by the cloud API."""

    POSTPAID = 0
    PREPAID = 1


@dataclass(frozen=True)
class Credential:
    """API key pair used to sign cloud requests."""

    secret_id: str
    secret_key: str = field(repr=False)  # Never log secret key


@dataclass(frozen=True)
class ProviderParams:
    """Region and credential resolved from a provider parameter bundle."""

    region: str
    credential: Credential


def parse_provider_params(bundle: str) -> Dict[str, str]:
    """
    Split an opaque provider parameter bundle into a key/value mapping.

    The bundle is a ``;``-separated list of ``key=value`` pairs, e.g.
    ``Region=ap-guangzhou;SecretID=xxx;SecretKey=yyy``.

    Args:
        bundle: The serialized bundle

    Returns:
        Dictionary of key to value. Empty segments are ignored.

    Raises:
        MalformedInputError: If a segment has no ``=``
    """
    params: Dict[str, str] = {}
    for segment in (bundle or "").split(";"):
        segment = segment.strip()
        if not segment:
            continue
        key, sep, value = segment.partition("=")
        if not sep or not key.strip():
            raise MalformedInputError(
                f"Provider params segment is not key=value: '{key.strip()}'"
            )
        params[key.strip()] = value.strip()
    return params


def resolve_provider_params(bundle: str) -> ProviderParams:
    """
    Resolve region and credential from a provider parameter bundle.

    Raises:
        MalformedInputError: If Region, SecretID or SecretKey is missing
    """
    params = parse_provider_params(bundle)
    required = [
        PROVIDER_PARAM_REGION,
        PROVIDER_PARAM_SECRET_ID,
        PROVIDER_PARAM_SECRET_KEY,
    ]
    missing = [key for key in required if not params.get(key)]
    if missing:
        raise MalformedInputError(
            f"Provider params missing keys: {', '.join(missing)}"
        )

    return ProviderParams(
        region=params[PROVIDER_PARAM_REGION],
        credential=Credential(
            secret_id=params[PROVIDER_PARAM_SECRET_ID],
            secret_key=params[PROVIDER_PARAM_SECRET_KEY],
        ),
    )


def load_payload(raw: RawPayload) -> Dict[str, Any]:
    """
    Decode a raw action payload into a dictionary.

    Accepts JSON text (str or bytes) or an already decoded mapping.

    Raises:
        MalformedInputError: If the payload is not a JSON object
    """
    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Payload is not valid UTF-8: {e}") from e

    if not isinstance(raw, str):
        raise MalformedInputError(
            f"Payload must be JSON text or a mapping, got {type(raw).__name__}"
        )

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedInputError(
            f"Payload must be a JSON object, got {type(payload).__name__}"
        )
    return payload


@dataclass
class ResourceSpecBatch:
    """Ordered batch of resource specs consumed by one action invocation."""

    inputs: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.inputs)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize back to the ``{"inputs": [...]}`` payload shape."""
        return {"inputs": [item.to_dict() for item in self.inputs]}


@dataclass
class ProvisionResult:
    """Outcome of provisioning one resource spec."""

    request_id: str
    guid: str
    deal_id: Optional[str] = None
    task_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"request_id": self.request_id, "guid": self.guid}
        if self.deal_id is not None:
            result["deal_id"] = self.deal_id
        if self.task_id is not None:
            result["task_id"] = self.task_id
        return result


@dataclass
class ResultBatch:
    """Ordered results, index-aligned with the originating batch."""

    outputs: List[ProvisionResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.outputs)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the ``{"outputs": [...]}`` payload shape."""
        return {"outputs": [result.to_dict() for result in self.outputs]}
