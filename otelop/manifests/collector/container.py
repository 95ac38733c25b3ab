from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.config import OperatorConfig
from otelop.manifests import manifestutils, naming
from otelop.manifests.constants import ManifestConstants


def container(config: OperatorConfig, collector: OpenTelemetryCollector, add_config: bool = True) -> client.V1Container:
    """The managed collector container.

    Args:
        config: Operator configuration
        collector: Collector resource
        add_config: Whether to point the collector at the operator-generated
            config file and mount it. Deployments and DaemonSets pass True.
    """
    spec = collector.spec
    image = spec.image or config.collector_image

    args = []
    volume_mounts = []
    if add_config:
        config_path = f"{ManifestConstants.CONFIG_MOUNT_PATH}/{ManifestConstants.COLLECTOR_CONFIG_KEY}"
        args.append(f"--config={config_path}")
        volume_mounts.append(
            client.V1VolumeMount(
                name=naming.collector_config_map_volume(),
                mount_path=ManifestConstants.CONFIG_MOUNT_PATH,
            )
        )
    # sorted so the pod template is stable across reconciles
    for key, value in sorted((spec.args or {}).items()):
        args.append(f"--{key}={value}")
    volume_mounts.extend(spec.volume_mounts or [])

    ports = manifestutils.container_ports(spec.ports)
    if not any(p.name == "metrics" or p.container_port == ManifestConstants.COLLECTOR_METRICS_PORT for p in ports):
        ports.insert(
            0,
            client.V1ContainerPort(
                name="metrics", container_port=ManifestConstants.COLLECTOR_METRICS_PORT, protocol="TCP"
            ),
        )

    env = list(spec.env or [])
    env.append(manifestutils.field_ref_env("POD_NAME", "metadata.name"))

    return client.V1Container(
        name=naming.collector_container(),
        image=image,
        image_pull_policy=spec.image_pull_policy,
        args=args,
        ports=ports,
        volume_mounts=volume_mounts,
        env=env,
        env_from=spec.env_from,
        resources=spec.resources,
        security_context=spec.security_context,
    )


def volumes(config: OperatorConfig, collector: OpenTelemetryCollector) -> list[client.V1Volume]:
    result = [
        manifestutils.config_map_volume(
            naming.collector_config_map_volume(),
            naming.collector_config_map(collector.name),
            ManifestConstants.COLLECTOR_CONFIG_KEY,
        )
    ]
    result.extend(collector.spec.volumes or [])
    return result
