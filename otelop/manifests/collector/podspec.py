from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.config import OperatorConfig
from otelop.manifests import manifestutils, naming
from otelop.manifests.collector.container import container, volumes


def pod_spec(config: OperatorConfig, collector: OpenTelemetryCollector, with_init_containers: bool) -> client.V1PodSpec:
    """Pod spec shared by the collector Deployment and DaemonSet."""
    spec = collector.spec

    containers = [container(config, collector, add_config=True)]
    containers.extend(spec.additional_containers or [])

    return client.V1PodSpec(
        service_account_name=spec.service_account or naming.collector_service_account(collector.name),
        init_containers=spec.init_containers if with_init_containers else None,
        containers=containers,
        volumes=volumes(config, collector),
        tolerations=list(spec.tolerations or []),
        node_selector=spec.node_selector,
        host_network=spec.host_network,
        dns_policy=manifestutils.dns_policy(spec.host_network),
        security_context=spec.pod_security_context,
        priority_class_name=spec.priority_class_name,
        affinity=spec.affinity,
    )
