from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from otelop import env_vars
from otelop.logger import init_logger

logger = init_logger(__name__)


@dataclass(frozen=True)
class OperatorConfig:
    """Process-wide operator policy shared by every manifest builder.

    Instances are frozen: builders running concurrently read the same config
    without locking.
    """

    labels_filter: tuple[str, ...] = field(default_factory=lambda: tuple(env_vars.OTELOP_LABELS_FILTER))
    """Glob patterns; user labels whose key matches one are not propagated."""

    collector_image: str = field(default_factory=lambda: env_vars.OTELOP_COLLECTOR_IMAGE)
    target_allocator_image: str = field(default_factory=lambda: env_vars.OTELOP_TARGET_ALLOCATOR_IMAGE)
    opamp_bridge_image: str = field(default_factory=lambda: env_vars.OTELOP_OPAMP_BRIDGE_IMAGE)

    def __post_init__(self) -> None:
        # YAML and callers hand over lists or a single pattern
        if isinstance(self.labels_filter, str):
            object.__setattr__(self, "labels_filter", (self.labels_filter,))
        elif self.labels_filter is None or isinstance(self.labels_filter, list):
            object.__setattr__(self, "labels_filter", tuple(self.labels_filter or ()))
        elif not isinstance(self.labels_filter, tuple):
            raise ValueError(f"labels_filter must be a pattern or a list of patterns, got {self.labels_filter!r}")

        for pattern in self.labels_filter:
            if not isinstance(pattern, str) or not pattern:
                raise ValueError(f"labels_filter entries must be non-empty strings, got {pattern!r}")

        logger.debug(f"init OperatorConfig: {self}")

    @classmethod
    def from_env(cls, config_path: str | Path | None = None) -> "OperatorConfig":
        if not config_path:
            config_path = env_vars.OTELOP_CONFIG

        if not config_path:
            return cls()

        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"config file {config_file} not found")

        with open(config_file) as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"config file {config_file} must hold a mapping")

        known = {item.name for item in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"unknown operator config keys: {', '.join(sorted(unknown))}")

        return cls(**config)
