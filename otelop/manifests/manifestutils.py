"""Helpers shared by every manifest builder: labels, filtering, hashing, DNS policy."""

import hashlib
import json
from collections.abc import Iterable, Mapping

from kubernetes import client

from otelop.apis.common import ObjectMeta
from otelop.manifests.constants import ManifestConstants


def is_filtered_set(key: str, patterns: Iterable[str]) -> bool:
    """Check whether a label key matches any of the label filter patterns.

    Pattern grammar: literal characters plus ``*``, which matches any run of
    characters, including an empty one. Matching is case-sensitive and
    anchored on the whole key, so ``foo*`` matches ``foo`` and ``foobar`` but
    not ``xfoo``; ``*.bar`` and ``app.*.bar`` work the same way. No other
    character is special.
    """
    return any(_glob_match(key, pattern) for pattern in patterns)


def _glob_match(key: str, pattern: str) -> bool:
    if "*" not in pattern:
        return key == pattern

    head, *middle, tail = pattern.split("*")
    if len(key) < len(head) + len(tail):
        return False
    if not key.startswith(head) or not key.endswith(tail):
        return False

    # inner segments must appear in order between head and tail
    position = len(head)
    end = len(key) - len(tail)
    for segment in middle:
        if not segment:
            continue
        found = key.find(segment, position, end)
        if found < 0:
            return False
        position = found + len(segment)
    return True


def filter_labels(labels: Mapping[str, str] | None, patterns: Iterable[str]) -> dict[str, str]:
    patterns = tuple(patterns)
    return {k: v for k, v in (labels or {}).items() if not is_filtered_set(k, patterns)}


def version_from_image(image: str) -> str:
    """Return the tag of ``image``, or ``latest`` when the image pins none.

    Digests are ignored: ``repo/img:1.2@sha256:...`` yields ``1.2``.
    """
    reference = image.split("@", 1)[0]
    _, _, last_segment = reference.rpartition("/")
    if ":" in last_segment:
        tag = last_segment.rsplit(":", 1)[1]
        if tag:
            return tag
    return ManifestConstants.DEFAULT_VERSION


def selector_labels(meta: ObjectMeta, component: str) -> dict[str, str]:
    """Labels a workload selects its pods by.

    ``name`` and ``version`` are left out on purpose: they may change for the
    same resource, and a workload's selector is immutable.
    """
    return {
        ManifestConstants.LABEL_MANAGED_BY: ManifestConstants.MANAGED_BY,
        ManifestConstants.LABEL_INSTANCE: f"{meta.namespace}.{meta.name}",
        ManifestConstants.LABEL_PART_OF: ManifestConstants.PART_OF,
        ManifestConstants.LABEL_COMPONENT: component,
    }


def labels(meta: ObjectMeta, name: str, image: str, component: str, filter_patterns: Iterable[str]) -> dict[str, str]:
    """Identity labels for an object generated from ``meta``.

    User labels are copied first, minus those matching ``filter_patterns``;
    canonical labels are applied last and always win, which keeps the
    selector labels a subset of the result.
    """
    base = filter_labels(meta.labels, filter_patterns)
    base.update(selector_labels(meta, component))
    base[ManifestConstants.LABEL_VERSION] = version_from_image(image)
    base[ManifestConstants.LABEL_NAME] = name
    return base


def config_map_hash(config_map: client.V1ConfigMap) -> str:
    """sha256 over the ConfigMap data, used to roll pods when the config changes."""
    encoded = json.dumps(config_map.data or {}, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


def dns_policy(host_network: bool) -> str:
    # host-networked pods only resolve cluster names with ClusterFirstWithHostNet
    if host_network:
        return ManifestConstants.DNS_CLUSTER_FIRST_WITH_HOST_NET
    return ManifestConstants.DNS_CLUSTER_FIRST


def config_map_volume(volume_name: str, config_map_name: str, key: str) -> client.V1Volume:
    return client.V1Volume(
        name=volume_name,
        config_map=client.V1ConfigMapVolumeSource(
            name=config_map_name,
            items=[client.V1KeyToPath(key=key, path=key)],
        ),
    )


def field_ref_env(name: str, field_path: str) -> client.V1EnvVar:
    return client.V1EnvVar(
        name=name,
        value_from=client.V1EnvVarSource(field_ref=client.V1ObjectFieldSelector(field_path=field_path)),
    )


def container_ports(ports: Iterable[client.V1ServicePort] | None) -> list[client.V1ContainerPort]:
    return [
        client.V1ContainerPort(name=port.name, container_port=port.port, protocol=port.protocol)
        for port in ports or []
    ]
