"""Manifests for the OpenTelemetry collector."""

from otelop.manifests.collector.annotations import annotations, pod_annotations
from otelop.manifests.collector.configmap import config_map
from otelop.manifests.collector.container import container, volumes
from otelop.manifests.collector.daemonset import daemonset
from otelop.manifests.collector.deployment import deployment
from otelop.manifests.collector.labels import labels, selector_labels

__all__ = [
    "annotations",
    "config_map",
    "container",
    "daemonset",
    "deployment",
    "labels",
    "pod_annotations",
    "selector_labels",
    "volumes",
]
