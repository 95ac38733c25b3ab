"""Manifests for the target allocator embedded in a collector resource."""

from otelop.manifests.target_allocator.annotations import annotations
from otelop.manifests.target_allocator.configmap import config_map
from otelop.manifests.target_allocator.container import container, volumes
from otelop.manifests.target_allocator.deployment import deployment
from otelop.manifests.target_allocator.labels import labels, selector_labels

__all__ = [
    "annotations",
    "config_map",
    "container",
    "deployment",
    "labels",
    "selector_labels",
    "volumes",
]
