"""Extract the scrape configuration the target allocator distributes from a collector config."""

from typing import Any

import yaml

from otelop.common.exceptions import ManifestBuildError


def config_from_string(collector_config: str) -> dict[str, Any]:
    try:
        config = yaml.safe_load(collector_config)
    except yaml.YAMLError as e:
        raise ManifestBuildError(f"failed to parse collector config: {e}") from e

    if not isinstance(config, dict):
        raise ManifestBuildError("collector config must be a mapping")
    return config


def prometheus_config(collector_config: str) -> dict[str, Any]:
    """Return ``receivers.prometheus.config`` of a collector configuration.

    Raises:
        ManifestBuildError: If the config cannot be parsed or has no usable
            prometheus receiver
    """
    config = config_from_string(collector_config)

    receivers = config.get("receivers") or {}
    prometheus = receivers.get("prometheus") if isinstance(receivers, dict) else None
    if not isinstance(prometheus, dict):
        raise ManifestBuildError("no prometheus available as part of the configuration")

    scrape = prometheus.get("config")
    if not isinstance(scrape, dict):
        raise ManifestBuildError("prometheus receiver has no config")
    return scrape
