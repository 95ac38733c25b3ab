from collections.abc import Iterable

from otelop.apis.collector import OpenTelemetryCollector
from otelop.manifests import manifestutils
from otelop.manifests.constants import ManifestConstants


def labels(collector: OpenTelemetryCollector, name: str, filter_labels: Iterable[str]) -> dict[str, str]:
    return manifestutils.labels(
        collector.metadata, name, collector.spec.image, ManifestConstants.COMPONENT_COLLECTOR, filter_labels
    )


def selector_labels(collector: OpenTelemetryCollector) -> dict[str, str]:
    return manifestutils.selector_labels(collector.metadata, ManifestConstants.COMPONENT_COLLECTOR)
