import yaml
from kubernetes import client

from otelop.apis.opamp_bridge import OpAMPBridge
from otelop.config import OperatorConfig
from otelop.manifests import naming
from otelop.manifests.constants import ManifestConstants
from otelop.manifests.opamp_bridge.labels import labels


def bridge_config(bridge: OpAMPBridge) -> dict:
    """The bridge's own configuration document, as mounted under ``/conf``."""
    config = {
        "endpoint": bridge.spec.endpoint,
        "protocol": bridge.spec.protocol,
        "capabilities": dict(sorted(bridge.spec.capabilities.items())),
    }
    if bridge.spec.components_allowed:
        config["componentsAllowed"] = {
            kind: list(components) for kind, components in sorted(bridge.spec.components_allowed.items())
        }
    return config


def config_map(config: OperatorConfig, bridge: OpAMPBridge) -> client.V1ConfigMap:
    name = naming.opamp_bridge_config_map(bridge.name)
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=bridge.namespace,
            labels=labels(bridge, name, config.labels_filter),
            annotations=dict(bridge.metadata.annotations or {}),
        ),
        data={ManifestConstants.OPAMP_BRIDGE_CONFIG_KEY: yaml.safe_dump(bridge_config(bridge), sort_keys=False)},
    )
