import yaml
from kubernetes import client

from otelop.apis.collector import AllocationStrategy, OpenTelemetryCollector
from otelop.config import OperatorConfig
from otelop.manifests import naming
from otelop.manifests.collector.labels import selector_labels as collector_selector_labels
from otelop.manifests.constants import ManifestConstants
from otelop.manifests.target_allocator.adapters import prometheus_config
from otelop.manifests.target_allocator.labels import labels


def allocator_config(collector: OpenTelemetryCollector) -> dict:
    """The target allocator's configuration document.

    Raises:
        ManifestBuildError: If the collector config has no usable prometheus receiver
    """
    ta = collector.spec.target_allocator

    result = {
        "label_selector": collector_selector_labels(collector),
        "config": prometheus_config(collector.spec.config),
        "allocation_strategy": (ta.allocation_strategy or AllocationStrategy.LEAST_WEIGHTED).value,
    }
    if ta.filter_strategy:
        result["filter_strategy"] = ta.filter_strategy
    if ta.prometheus_cr.enabled and ta.prometheus_cr.scrape_interval:
        result["prometheus_cr"] = {"scrape_interval": ta.prometheus_cr.scrape_interval}
    return result


def config_map(config: OperatorConfig, collector: OpenTelemetryCollector) -> client.V1ConfigMap:
    name = naming.target_allocator_config_map(collector.name)
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=collector.namespace,
            labels=labels(collector, name, config.labels_filter),
            annotations=dict(collector.metadata.annotations or {}),
        ),
        data={ManifestConstants.TARGET_ALLOCATOR_CONFIG_KEY: yaml.safe_dump(allocator_config(collector))},
    )
