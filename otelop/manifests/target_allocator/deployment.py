from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.common.exceptions import ManifestBuildError
from otelop.config import OperatorConfig
from otelop.logger import init_logger
from otelop.manifests import manifestutils, naming
from otelop.manifests.target_allocator.annotations import annotations
from otelop.manifests.target_allocator.configmap import config_map
from otelop.manifests.target_allocator.container import container, volumes
from otelop.manifests.target_allocator.labels import labels, selector_labels

logger = init_logger(__name__)


def deployment(config: OperatorConfig, collector: OpenTelemetryCollector) -> client.V1Deployment:
    """Build the target allocator Deployment for ``collector``.

    A ConfigMap that cannot be built only costs the config hash annotation;
    the Deployment is still returned.
    """
    ta = collector.spec.target_allocator
    name = naming.target_allocator(collector.name)
    ta_labels = labels(collector, name, config.labels_filter)

    try:
        ta_config_map = config_map(config, collector)
    except ManifestBuildError as e:
        logger.info(f"failed to construct target allocator config map for annotations: {e}")
        ta_config_map = None

    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=collector.namespace,
            labels=ta_labels,
        ),
        spec=client.V1DeploymentSpec(
            replicas=ta.replicas,
            selector=client.V1LabelSelector(match_labels=selector_labels(collector)),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(
                    labels=dict(ta_labels),
                    annotations=annotations(collector, ta_config_map),
                ),
                spec=client.V1PodSpec(
                    service_account_name=ta.service_account or naming.target_allocator_service_account(collector.name),
                    containers=[container(config, collector)],
                    volumes=volumes(config, collector),
                    node_selector=ta.node_selector,
                    tolerations=list(ta.tolerations or []),
                    affinity=ta.affinity,
                    security_context=ta.pod_security_context,
                    host_network=False,
                    dns_policy=manifestutils.dns_policy(False),
                    topology_spread_constraints=ta.topology_spread_constraints,
                ),
            ),
        ),
    )
