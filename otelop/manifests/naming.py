"""Names of the objects generated for a resource.

Every generated name must be a valid DNS label, so names built from a long
resource name are truncated to 63 characters.
"""

import re

DNS_LABEL_MAX_LENGTH = 63

_NON_ALNUM_EDGES = re.compile(r"^[^a-zA-Z0-9]+|[^a-zA-Z0-9]+$")


def truncate(template: str, max_length: int, *values: str) -> str:
    """Format ``template`` with ``values``, shortening only the first value when too long.

    Leading and trailing non-alphanumeric characters are trimmed afterwards.
    """
    result = template % values
    excess = len(result) - max_length
    if excess > 0 and values:
        first = str(values[0])
        first = first[: len(first) - excess] if len(first) > excess else ""
        result = template % (first, *values[1:])
    return _NON_ALNUM_EDGES.sub("", result)


def collector(name: str) -> str:
    return truncate("%s-collector", DNS_LABEL_MAX_LENGTH, name)


def target_allocator(name: str) -> str:
    return truncate("%s-targetallocator", DNS_LABEL_MAX_LENGTH, name)


def opamp_bridge(name: str) -> str:
    return truncate("%s-opamp-bridge", DNS_LABEL_MAX_LENGTH, name)


# ConfigMaps share the workload's name.
collector_config_map = collector
target_allocator_config_map = target_allocator
opamp_bridge_config_map = opamp_bridge

collector_service_account = collector
target_allocator_service_account = target_allocator
opamp_bridge_service_account = opamp_bridge


def collector_container() -> str:
    return "otc-container"


def target_allocator_container() -> str:
    return "ta-container"


def opamp_bridge_container() -> str:
    return "opamp-bridge-container"


def collector_config_map_volume() -> str:
    return "otc-internal"


def target_allocator_config_map_volume() -> str:
    return "ta-internal"


def opamp_bridge_config_map_volume() -> str:
    return "opamp-bridge-internal"
