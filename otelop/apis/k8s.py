"""Bridge between pydantic resource models and the kubernetes client models.

Custom resources arrive as plain API dicts (camelCase keys). Nested
Kubernetes structures are turned into the official ``kubernetes.client``
models so the manifest builders can hand them straight to ``V1PodSpec`` and
friends, and so the whole manifest serializes through one code path.
"""

import json
from functools import lru_cache
from typing import Annotated, Any

from kubernetes import client
from pydantic import BeforeValidator, PlainSerializer


@lru_cache(maxsize=1)
def _api_client() -> client.ApiClient:
    return client.ApiClient()


def deserialize(data: Any, klass: str) -> Any:
    """Deserialize an API dict (or list of dicts) into kubernetes client models.

    Args:
        data: Decoded JSON as found in a resource manifest
        klass: Kubernetes client type name, e.g. ``V1Toleration`` or ``list[V1Volume]``
    """
    return _api_client().deserialize(json.dumps(data), klass, "application/json")


def serialize(obj: Any) -> Any:
    """Render kubernetes client models into plain camelCase API dicts."""
    return _api_client().sanitize_for_serialization(obj)


def k8s_model(klass: str) -> Any:
    """Field type for a kubernetes client model.

    Dicts are deserialized on validation; JSON dumps render the model back
    into its API form.
    """

    def _convert(value: Any) -> Any:
        if isinstance(value, dict):
            return deserialize(value, klass)
        return value

    return Annotated[
        getattr(client, klass),
        BeforeValidator(_convert),
        PlainSerializer(serialize, return_type=Any, when_used="json"),
    ]


Affinity = k8s_model("V1Affinity")
Container = k8s_model("V1Container")
EnvFromSource = k8s_model("V1EnvFromSource")
EnvVar = k8s_model("V1EnvVar")
PodSecurityContext = k8s_model("V1PodSecurityContext")
ResourceRequirements = k8s_model("V1ResourceRequirements")
SecurityContext = k8s_model("V1SecurityContext")
ServicePort = k8s_model("V1ServicePort")
Toleration = k8s_model("V1Toleration")
TopologySpreadConstraint = k8s_model("V1TopologySpreadConstraint")
Volume = k8s_model("V1Volume")
VolumeMount = k8s_model("V1VolumeMount")
