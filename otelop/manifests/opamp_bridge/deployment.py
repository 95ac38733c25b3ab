from kubernetes import client

from otelop.apis.opamp_bridge import OpAMPBridge
from otelop.config import OperatorConfig
from otelop.logger import init_logger
from otelop.manifests import manifestutils, naming
from otelop.manifests.opamp_bridge.annotations import annotations, pod_annotations
from otelop.manifests.opamp_bridge.configmap import config_map
from otelop.manifests.opamp_bridge.container import container, volumes
from otelop.manifests.opamp_bridge.labels import labels, selector_labels

logger = init_logger(__name__)


def deployment(config: OperatorConfig, bridge: OpAMPBridge) -> client.V1Deployment:
    """Build the Deployment running the OpAMP bridge described by ``bridge``."""
    spec = bridge.spec
    name = naming.opamp_bridge(bridge.name)
    bridge_labels = labels(bridge, name, config.labels_filter)

    bridge_config_map = config_map(config, bridge)
    logger.debug(f"building opamp bridge deployment {bridge.namespace}/{name}")

    containers = [container(config, bridge)]
    containers.extend(spec.additional_containers or [])

    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=bridge.namespace,
            labels=bridge_labels,
            annotations=annotations(bridge, bridge_config_map),
        ),
        spec=client.V1DeploymentSpec(
            replicas=spec.replicas,
            selector=client.V1LabelSelector(match_labels=selector_labels(bridge)),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(
                    labels=dict(bridge_labels),
                    annotations=pod_annotations(bridge),
                ),
                spec=client.V1PodSpec(
                    service_account_name=spec.service_account or naming.opamp_bridge_service_account(bridge.name),
                    containers=containers,
                    volumes=volumes(config, bridge),
                    tolerations=list(spec.tolerations or []),
                    node_selector=spec.node_selector,
                    host_network=spec.host_network,
                    dns_policy=manifestutils.dns_policy(spec.host_network),
                    security_context=spec.pod_security_context,
                    priority_class_name=spec.priority_class_name,
                    affinity=spec.affinity,
                ),
            ),
        ),
    )
