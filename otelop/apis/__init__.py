"""Custom resource schemas handled by the operator."""

from typing import Any

from pydantic import ValidationError

from otelop.apis.collector import (
    AllocationStrategy,
    Mode,
    OpenTelemetryCollector,
    OpenTelemetryCollectorSpec,
    PrometheusCR,
    TargetAllocatorEmbedded,
)
from otelop.apis.common import API_VERSION, CustomResource, ObjectMeta, UpgradeStrategy
from otelop.apis.opamp_bridge import OpAMPBridge, OpAMPBridgeSpec
from otelop.common.exceptions import InvalidResourceError, UnsupportedResourceError

RESOURCE_KINDS = {
    "OpAMPBridge": OpAMPBridge,
    "OpenTelemetryCollector": OpenTelemetryCollector,
}


def from_dict(data: dict[str, Any]) -> CustomResource:
    """Load a custom resource as read from the API server or a manifest file."""
    if not isinstance(data, dict):
        raise InvalidResourceError(f"resource must be a mapping, got {type(data).__name__}")

    kind = data.get("kind")
    model = RESOURCE_KINDS.get(kind)
    if model is None:
        raise UnsupportedResourceError(f"unsupported resource kind '{kind}'")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidResourceError(f"invalid {kind}: {e}") from e


__all__ = [
    "API_VERSION",
    "AllocationStrategy",
    "CustomResource",
    "Mode",
    "ObjectMeta",
    "OpAMPBridge",
    "OpAMPBridgeSpec",
    "OpenTelemetryCollector",
    "OpenTelemetryCollectorSpec",
    "PrometheusCR",
    "RESOURCE_KINDS",
    "TargetAllocatorEmbedded",
    "UpgradeStrategy",
    "from_dict",
]
