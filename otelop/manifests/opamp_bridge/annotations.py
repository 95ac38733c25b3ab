from kubernetes import client

from otelop.apis.opamp_bridge import OpAMPBridge
from otelop.manifests import manifestutils
from otelop.manifests.constants import ManifestConstants


def annotations(bridge: OpAMPBridge, config_map: client.V1ConfigMap | None) -> dict[str, str]:
    """Workload annotations: the resource's own, plus the config hash when the ConfigMap is known."""
    result = dict(bridge.metadata.annotations or {})
    if config_map is not None:
        result[ManifestConstants.ANNOTATION_CONFIG_SHA] = manifestutils.config_map_hash(config_map)
    return result


def pod_annotations(bridge: OpAMPBridge) -> dict[str, str]:
    return dict(bridge.spec.pod_annotations or {})
