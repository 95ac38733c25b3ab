from typing import Literal

from pydantic import Field

from otelop.apis import k8s
from otelop.apis.common import CustomResource, ResourceModel, UpgradeStrategy


class OpAMPBridgeSpec(ResourceModel):
    """Desired state of an OpAMP bridge."""

    endpoint: str = ""
    """OpAMP server endpoint the bridge connects to."""

    protocol: str = ""
    """Transport used to reach the OpAMP server (e.g. ``wss``)."""

    capabilities: dict[str, bool] = Field(default_factory=dict)
    """OpAMP agent capabilities advertised by the bridge, keyed by capability name."""

    components_allowed: dict[str, list[str]] | None = None
    """Collector components the bridge may configure, keyed by component kind."""

    replicas: int | None = None
    image: str = ""
    image_pull_policy: str | None = None
    service_account: str = ""
    upgrade_strategy: UpgradeStrategy | None = None

    env: list[k8s.EnvVar] | None = None
    env_from: list[k8s.EnvFromSource] | None = None
    resources: k8s.ResourceRequirements | None = None

    node_selector: dict[str, str] | None = None
    tolerations: list[k8s.Toleration] | None = None
    affinity: k8s.Affinity | None = None
    security_context: k8s.SecurityContext | None = None
    pod_security_context: k8s.PodSecurityContext | None = None
    pod_annotations: dict[str, str] | None = None
    host_network: bool = False
    priority_class_name: str = ""

    volumes: list[k8s.Volume] | None = None
    volume_mounts: list[k8s.VolumeMount] | None = None
    ports: list[k8s.ServicePort] | None = None
    additional_containers: list[k8s.Container] | None = None


class OpAMPBridge(CustomResource):
    kind: Literal["OpAMPBridge"] = "OpAMPBridge"
    spec: OpAMPBridgeSpec = Field(default_factory=OpAMPBridgeSpec)
