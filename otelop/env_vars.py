import os
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    OTELOP_LOGGING_PATH: str | None = None
    OTELOP_LOGGING_FILE_NAME: str | None = None
    OTELOP_LOGGING_LEVEL: str | None = None
    OTELOP_CONFIG: str | None = None

    # Operator policy
    OTELOP_LABELS_FILTER: list[str] = []
    OTELOP_COLLECTOR_IMAGE: str
    OTELOP_TARGET_ALLOCATOR_IMAGE: str
    OTELOP_OPAMP_BRIDGE_IMAGE: str


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


environment_variables: dict[str, Callable[[], Any]] = {
    "OTELOP_LOGGING_PATH": lambda: os.getenv("OTELOP_LOGGING_PATH"),
    "OTELOP_LOGGING_FILE_NAME": lambda: os.getenv("OTELOP_LOGGING_FILE_NAME", "otelop.log"),
    "OTELOP_LOGGING_LEVEL": lambda: os.getenv("OTELOP_LOGGING_LEVEL", "INFO"),
    "OTELOP_CONFIG": lambda: os.getenv("OTELOP_CONFIG"),
    "OTELOP_LABELS_FILTER": lambda: _split_csv(os.getenv("OTELOP_LABELS_FILTER")),
    "OTELOP_COLLECTOR_IMAGE": lambda: os.getenv(
        "OTELOP_COLLECTOR_IMAGE", "ghcr.io/open-telemetry/opentelemetry-collector-releases/opentelemetry-collector:latest"
    ),
    "OTELOP_TARGET_ALLOCATOR_IMAGE": lambda: os.getenv(
        "OTELOP_TARGET_ALLOCATOR_IMAGE",
        "ghcr.io/open-telemetry/opentelemetry-operator/target-allocator:latest",
    ),
    "OTELOP_OPAMP_BRIDGE_IMAGE": lambda: os.getenv(
        "OTELOP_OPAMP_BRIDGE_IMAGE", "ghcr.io/open-telemetry/opentelemetry-operator/operator-opamp-bridge:latest"
    ),
}


def __getattr__(name: str):
    if name in environment_variables:
        return environment_variables[name]()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def is_set(name: str):
    """Check if an environment variable is explicitly set."""
    if name in environment_variables:
        return name in os.environ
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
