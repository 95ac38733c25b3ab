from enum import Enum
from typing import Literal

from pydantic import Field

from otelop.apis import k8s
from otelop.apis.common import CustomResource, ResourceModel, UpgradeStrategy


class Mode(str, Enum):
    DEPLOYMENT = "deployment"
    DAEMONSET = "daemonset"


class AllocationStrategy(str, Enum):
    LEAST_WEIGHTED = "least-weighted"
    CONSISTENT_HASHING = "consistent-hashing"


class PrometheusCR(ResourceModel):
    enabled: bool = False
    scrape_interval: str | None = None
    """Duration string such as ``30s``; left to the target allocator's default when unset."""


class TargetAllocatorEmbedded(ResourceModel):
    """Target allocator settings nested in a collector resource."""

    enabled: bool = False
    replicas: int | None = None
    image: str = ""
    service_account: str = ""
    allocation_strategy: AllocationStrategy | None = None
    filter_strategy: str = ""
    prometheus_cr: PrometheusCR = Field(default_factory=PrometheusCR, alias="prometheusCR")

    env: list[k8s.EnvVar] | None = None
    resources: k8s.ResourceRequirements | None = None
    node_selector: dict[str, str] | None = None
    tolerations: list[k8s.Toleration] | None = None
    affinity: k8s.Affinity | None = None
    security_context: k8s.SecurityContext | None = None
    pod_security_context: k8s.PodSecurityContext | None = None
    topology_spread_constraints: list[k8s.TopologySpreadConstraint] | None = None


class OpenTelemetryCollectorSpec(ResourceModel):
    mode: Mode = Mode.DEPLOYMENT
    config: str = ""
    """Raw collector configuration (YAML)."""

    replicas: int | None = None
    image: str = ""
    image_pull_policy: str | None = None
    service_account: str = ""
    upgrade_strategy: UpgradeStrategy | None = None
    args: dict[str, str] | None = None

    env: list[k8s.EnvVar] | None = None
    env_from: list[k8s.EnvFromSource] | None = None
    resources: k8s.ResourceRequirements | None = None
    volumes: list[k8s.Volume] | None = None
    volume_mounts: list[k8s.VolumeMount] | None = None
    ports: list[k8s.ServicePort] | None = None

    tolerations: list[k8s.Toleration] | None = None
    affinity: k8s.Affinity | None = None
    node_selector: dict[str, str] | None = None
    security_context: k8s.SecurityContext | None = None
    pod_security_context: k8s.PodSecurityContext | None = None
    pod_annotations: dict[str, str] | None = None
    host_network: bool = False
    priority_class_name: str = ""

    init_containers: list[k8s.Container] | None = None
    additional_containers: list[k8s.Container] | None = None

    target_allocator: TargetAllocatorEmbedded = Field(default_factory=TargetAllocatorEmbedded)


class OpenTelemetryCollector(CustomResource):
    kind: Literal["OpenTelemetryCollector"] = "OpenTelemetryCollector"
    spec: OpenTelemetryCollectorSpec = Field(default_factory=OpenTelemetryCollectorSpec)
