from collections.abc import Iterable

from otelop.apis.opamp_bridge import OpAMPBridge
from otelop.manifests import manifestutils
from otelop.manifests.constants import ManifestConstants


def labels(bridge: OpAMPBridge, name: str, filter_labels: Iterable[str]) -> dict[str, str]:
    return manifestutils.labels(
        bridge.metadata, name, bridge.spec.image, ManifestConstants.COMPONENT_OPAMP_BRIDGE, filter_labels
    )


def selector_labels(bridge: OpAMPBridge) -> dict[str, str]:
    return manifestutils.selector_labels(bridge.metadata, ManifestConstants.COMPONENT_OPAMP_BRIDGE)
