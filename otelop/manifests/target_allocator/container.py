from kubernetes import client

from otelop.apis.collector import OpenTelemetryCollector
from otelop.config import OperatorConfig
from otelop.manifests import manifestutils, naming
from otelop.manifests.constants import ManifestConstants


def container(config: OperatorConfig, collector: OpenTelemetryCollector) -> client.V1Container:
    ta = collector.spec.target_allocator
    image = ta.image or config.target_allocator_image

    env = list(ta.env or [])
    env.append(manifestutils.field_ref_env("OTELCOL_NAMESPACE", "metadata.namespace"))

    return client.V1Container(
        name=naming.target_allocator_container(),
        image=image,
        ports=[
            client.V1ContainerPort(
                name="http", container_port=ManifestConstants.TARGET_ALLOCATOR_HTTP_PORT, protocol="TCP"
            )
        ],
        volume_mounts=[
            client.V1VolumeMount(
                name=naming.target_allocator_config_map_volume(),
                mount_path=ManifestConstants.CONFIG_MOUNT_PATH,
            )
        ],
        env=env,
        resources=ta.resources,
        security_context=ta.security_context,
        liveness_probe=client.V1Probe(
            http_get=client.V1HTTPGetAction(path="/livez", port=ManifestConstants.TARGET_ALLOCATOR_HTTP_PORT)
        ),
        readiness_probe=client.V1Probe(
            http_get=client.V1HTTPGetAction(path="/readyz", port=ManifestConstants.TARGET_ALLOCATOR_HTTP_PORT)
        ),
    )


def volumes(config: OperatorConfig, collector: OpenTelemetryCollector) -> list[client.V1Volume]:
    return [
        manifestutils.config_map_volume(
            naming.target_allocator_config_map_volume(),
            naming.target_allocator_config_map(collector.name),
            ManifestConstants.TARGET_ALLOCATOR_CONFIG_KEY,
        )
    ]
