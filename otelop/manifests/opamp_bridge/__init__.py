"""Manifests for the OpAMP bridge."""

from otelop.manifests.opamp_bridge.annotations import annotations, pod_annotations
from otelop.manifests.opamp_bridge.configmap import config_map
from otelop.manifests.opamp_bridge.container import container, volumes
from otelop.manifests.opamp_bridge.deployment import deployment
from otelop.manifests.opamp_bridge.labels import labels, selector_labels

__all__ = [
    "annotations",
    "config_map",
    "container",
    "deployment",
    "labels",
    "pod_annotations",
    "selector_labels",
    "volumes",
]
