from kubernetes import client

from otelop.apis.opamp_bridge import OpAMPBridge
from otelop.config import OperatorConfig
from otelop.manifests import manifestutils, naming
from otelop.manifests.constants import ManifestConstants


def container(config: OperatorConfig, bridge: OpAMPBridge) -> client.V1Container:
    """The managed bridge container; always placed first in the pod."""
    spec = bridge.spec
    image = spec.image or config.opamp_bridge_image

    volume_mounts = [
        client.V1VolumeMount(
            name=naming.opamp_bridge_config_map_volume(),
            mount_path=ManifestConstants.CONFIG_MOUNT_PATH,
        )
    ]
    volume_mounts.extend(spec.volume_mounts or [])

    env = list(spec.env or [])
    env.append(manifestutils.field_ref_env("OTELCOL_NAMESPACE", "metadata.namespace"))

    return client.V1Container(
        name=naming.opamp_bridge_container(),
        image=image,
        image_pull_policy=spec.image_pull_policy,
        ports=manifestutils.container_ports(spec.ports),
        volume_mounts=volume_mounts,
        env=env,
        env_from=spec.env_from,
        resources=spec.resources,
        security_context=spec.security_context,
    )


def volumes(config: OperatorConfig, bridge: OpAMPBridge) -> list[client.V1Volume]:
    result = [
        manifestutils.config_map_volume(
            naming.opamp_bridge_config_map_volume(),
            naming.opamp_bridge_config_map(bridge.name),
            ManifestConstants.OPAMP_BRIDGE_CONFIG_KEY,
        )
    ]
    result.extend(bridge.spec.volumes or [])
    return result
