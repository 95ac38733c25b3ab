from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.config import OperatorConfig
from otelop.manifests import naming
from otelop.manifests.collector.annotations import annotations, pod_annotations
from otelop.manifests.collector.configmap import config_map
from otelop.manifests.collector.labels import labels, selector_labels
from otelop.manifests.collector.podspec import pod_spec


def daemonset(config: OperatorConfig, collector: OpenTelemetryCollector) -> client.V1DaemonSet:
    """Build the DaemonSet for a collector running in ``daemonset`` mode."""
    name = naming.collector(collector.name)
    collector_labels = labels(collector, name, config.labels_filter)
    collector_config_map = config_map(config, collector)

    return client.V1DaemonSet(
        api_version="apps/v1",
        kind="DaemonSet",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=collector.namespace,
            labels=collector_labels,
            annotations=annotations(collector, collector_config_map),
        ),
        spec=client.V1DaemonSetSpec(
            selector=client.V1LabelSelector(match_labels=selector_labels(collector)),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(
                    labels=dict(collector_labels),
                    annotations=pod_annotations(collector, collector_config_map),
                ),
                spec=pod_spec(config, collector, with_init_containers=True),
            ),
        ),
    )
