from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.manifests import manifestutils
from otelop.manifests.constants import ManifestConstants


def annotations(collector: OpenTelemetryCollector, config_map: client.V1ConfigMap | None) -> dict[str, str]:
    """Workload annotations.

    Prometheus scrape hints point at the collector's own metrics endpoint
    unless the resource already sets them. The config hash is added only when
    the ConfigMap could be built.
    """
    result = dict(collector.metadata.annotations or {})
    result.setdefault(ManifestConstants.ANNOTATION_PROMETHEUS_SCRAPE, "true")
    result.setdefault(ManifestConstants.ANNOTATION_PROMETHEUS_PORT, str(ManifestConstants.COLLECTOR_METRICS_PORT))
    result.setdefault(ManifestConstants.ANNOTATION_PROMETHEUS_PATH, "/metrics")
    if config_map is not None:
        result[ManifestConstants.ANNOTATION_CONFIG_SHA] = manifestutils.config_map_hash(config_map)
    return result


def pod_annotations(collector: OpenTelemetryCollector, config_map: client.V1ConfigMap | None) -> dict[str, str]:
    """Pod template annotations: ``spec.pod_annotations`` plus the config hash, so pods roll on config changes."""
    result = dict(collector.spec.pod_annotations or {})
    if config_map is not None:
        result[ManifestConstants.ANNOTATION_CONFIG_SHA] = manifestutils.config_map_hash(config_map)
    return result
