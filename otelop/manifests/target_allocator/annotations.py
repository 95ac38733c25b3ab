from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.manifests import manifestutils
from otelop.manifests.constants import ManifestConstants


def annotations(collector: OpenTelemetryCollector, config_map: client.V1ConfigMap | None) -> dict[str, str]:
    """Pod template annotations for the target allocator.

    Without a ConfigMap the hash is simply left out; pods then won't roll on
    config changes, which is acceptable.
    """
    result = dict(collector.spec.pod_annotations or {})
    if config_map is not None:
        config_hash = manifestutils.config_map_hash(config_map)
        if config_hash:
            result[ManifestConstants.ANNOTATION_TA_CONFIG_HASH] = config_hash
    return result
