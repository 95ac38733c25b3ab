from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.config import OperatorConfig
from otelop.manifests import naming
from otelop.manifests.collector.labels import labels
from otelop.manifests.constants import ManifestConstants


def config_map(config: OperatorConfig, collector: OpenTelemetryCollector) -> client.V1ConfigMap:
    name = naming.collector_config_map(collector.name)
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=collector.namespace,
            labels=labels(collector, name, config.labels_filter),
            annotations=dict(collector.metadata.annotations or {}),
        ),
        data={ManifestConstants.COLLECTOR_CONFIG_KEY: collector.spec.config},
    )
