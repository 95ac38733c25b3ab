import pytest
from kubernetes import client

from otelop.apis import ObjectMeta, OpAMPBridge, OpAMPBridgeSpec, OpenTelemetryCollector, OpenTelemetryCollectorSpec
from otelop.config import OperatorConfig

PROMETHEUS_COLLECTOR_CONFIG = """
receivers:
  prometheus:
    config:
      scrape_configs:
        - job_name: otel-collector
          scrape_interval: 10s
          static_configs:
            - targets: ["0.0.0.0:8888"]
exporters:
  debug: {}
service:
  pipelines:
    metrics:
      receivers: [prometheus]
      exporters: [debug]
"""

OTLP_COLLECTOR_CONFIG = """
receivers:
  otlp:
    protocols:
      grpc: {}
exporters:
  debug: {}
service:
  pipelines:
    traces:
      receivers: [otlp]
      exporters: [debug]
"""


@pytest.fixture
def operator_config():
    """Operator config with explicit images and no label filters."""
    return OperatorConfig(
        labels_filter=(),
        collector_image="otel/opentelemetry-collector:0.88.0",
        target_allocator_image="otel/target-allocator:0.88.0",
        opamp_bridge_image="otel/operator-opamp-bridge:0.88.0",
    )


@pytest.fixture
def tolerations():
    return [client.V1Toleration(key="hii", value="greeting", effect="NoSchedule")]


@pytest.fixture
def affinity():
    return client.V1Affinity(
        node_affinity=client.V1NodeAffinity(
            required_during_scheduling_ignored_during_execution=client.V1NodeSelector(
                node_selector_terms=[
                    client.V1NodeSelectorTerm(
                        match_expressions=[
                            client.V1NodeSelectorRequirement(key="node", operator="In", values=["test-node"])
                        ]
                    )
                ]
            )
        )
    )


@pytest.fixture
def make_bridge():
    """Factory for OpAMPBridge resources in my-namespace."""

    def _make(name: str = "my-instance", labels: dict | None = None, **spec) -> OpAMPBridge:
        return OpAMPBridge(
            metadata=ObjectMeta(name=name, namespace="my-namespace", labels=labels),
            spec=OpAMPBridgeSpec(**spec),
        )

    return _make


@pytest.fixture
def valid_bridge(make_bridge):
    """A bridge that passes create validation."""
    return make_bridge(
        endpoint="ws://opamp-server:4320/v1/opamp",
        protocol="wss",
        capabilities={"AcceptsRemoteConfig": True, "ReportsEffectiveConfig": True},
        ports=[client.V1ServicePort(name="metrics", port=8080)],
    )


@pytest.fixture
def make_collector():
    """Factory for OpenTelemetryCollector resources in my-namespace."""

    def _make(name: str = "my-instance", labels: dict | None = None, **spec) -> OpenTelemetryCollector:
        spec.setdefault("config", OTLP_COLLECTOR_CONFIG)
        return OpenTelemetryCollector(
            metadata=ObjectMeta(name=name, namespace="my-namespace", labels=labels),
            spec=OpenTelemetryCollectorSpec(**spec),
        )

    return _make


@pytest.fixture
def ta_collector(make_collector):
    """A collector with the target allocator enabled and a prometheus receiver."""
    return make_collector(config=PROMETHEUS_COLLECTOR_CONFIG, target_allocator={"enabled": True})


@pytest.fixture
def prometheus_collector_config():
    return PROMETHEUS_COLLECTOR_CONFIG


@pytest.fixture
def otlp_collector_config():
    return OTLP_COLLECTOR_CONFIG
