"""Compile a custom resource into every object the cluster needs to run it."""

from typing import Any

from otelop.apis import Mode, OpAMPBridge, OpenTelemetryCollector
from otelop.apis.common import CustomResource
from otelop.common.exceptions import UnsupportedResourceError
from otelop.config import OperatorConfig
from otelop.logger import init_logger
from otelop.manifests import collector, opamp_bridge, target_allocator

logger = init_logger(__name__)


def build_opamp_bridge(config: OperatorConfig, bridge: OpAMPBridge) -> list[Any]:
    return [
        opamp_bridge.config_map(config, bridge),
        opamp_bridge.deployment(config, bridge),
    ]


def build_collector(config: OperatorConfig, otelcol: OpenTelemetryCollector) -> list[Any]:
    """Collector objects, followed by the target allocator's when it is enabled.

    Unlike the workload builders, this raises ``ManifestBuildError`` when a
    ConfigMap cannot be built: applying a workload without its config is
    pointless.
    """
    objects: list[Any] = [collector.config_map(config, otelcol)]

    if otelcol.spec.mode == Mode.DEPLOYMENT:
        objects.append(collector.deployment(config, otelcol))
    elif otelcol.spec.mode == Mode.DAEMONSET:
        objects.append(collector.daemonset(config, otelcol))
    else:
        raise UnsupportedResourceError(f"unsupported collector mode '{otelcol.spec.mode}'")

    if otelcol.spec.target_allocator.enabled:
        objects.append(target_allocator.config_map(config, otelcol))
        objects.append(target_allocator.deployment(config, otelcol))

    return objects


def build(config: OperatorConfig, resource: CustomResource) -> list[Any]:
    """Compile ``resource`` into its objects, ConfigMaps before the workloads that mount them."""
    if isinstance(resource, OpAMPBridge):
        objects = build_opamp_bridge(config, resource)
    elif isinstance(resource, OpenTelemetryCollector):
        objects = build_collector(config, resource)
    else:
        raise UnsupportedResourceError(f"unsupported resource kind '{resource.kind}'")

    logger.info(f"compiled {resource.kind} {resource.namespace}/{resource.name} into {len(objects)} objects")
    return objects
