"""Unit tests for the OpAMPBridge admission hooks."""

import pytest
from kubernetes import client

from otelop._codes import codes
from otelop.apis import UpgradeStrategy
from otelop.common.exceptions import InvalidResourceError
from otelop.webhook import AdmissionRequest, Operation
from otelop.webhook import opamp_bridge as webhook


class TestDefault:
    def test_default_fills_unset_fields(self, make_bridge):
        bridge = make_bridge()

        defaulted = webhook.default(bridge)

        assert defaulted.spec.upgrade_strategy == UpgradeStrategy.AUTOMATIC
        assert defaulted.spec.replicas == 1
        assert defaulted.metadata.labels["app.kubernetes.io/managed-by"] == "opentelemetry-operator"

    def test_default_does_not_mutate_input(self, make_bridge):
        bridge = make_bridge()

        webhook.default(bridge)

        assert bridge.spec.replicas is None
        assert bridge.spec.upgrade_strategy is None
        assert bridge.metadata.labels is None

    def test_default_keeps_explicit_values(self, make_bridge):
        bridge = make_bridge(
            labels={"app.kubernetes.io/managed-by": "someone-else"},
            replicas=3,
            upgrade_strategy=UpgradeStrategy.NONE,
        )

        defaulted = webhook.default(bridge)

        assert defaulted.spec.replicas == 3
        assert defaulted.spec.upgrade_strategy == UpgradeStrategy.NONE
        assert defaulted.metadata.labels["app.kubernetes.io/managed-by"] == "someone-else"

    def test_default_replaces_empty_managed_by(self, make_bridge):
        defaulted = webhook.default(make_bridge(labels={"app.kubernetes.io/managed-by": ""}))

        assert defaulted.metadata.labels["app.kubernetes.io/managed-by"] == "opentelemetry-operator"

    def test_default_is_idempotent(self, make_bridge):
        once = webhook.default(make_bridge(labels={"team": "a"}))
        twice = webhook.default(once)

        assert once == twice


class TestValidateCreate:
    """Test cases for validate_create."""

    def test_valid_bridge(self, valid_bridge):
        webhook.validate_create(valid_bridge)

    @pytest.mark.parametrize(
        "overrides, field, fragment",
        [
            ({"endpoint": ""}, "spec.endpoint", "endpoint"),
            ({"endpoint": "   "}, "spec.endpoint", "endpoint"),
            ({"protocol": ""}, "spec.protocol", "protocol"),
            ({"capabilities": {}}, "spec.capabilities", "capabilities"),
        ],
    )
    def test_missing_fields(self, make_bridge, overrides, field, fragment):
        spec = {
            "endpoint": "ws://opamp-server:4320/v1/opamp",
            "protocol": "wss",
            "capabilities": {"AcceptsRemoteConfig": True},
        }
        spec.update(overrides)

        with pytest.raises(InvalidResourceError) as exc_info:
            webhook.validate_create(make_bridge(**spec))

        assert exc_info.value.field == field
        assert fragment in str(exc_info.value)
        assert exc_info.value.code == codes.INVALID_RESOURCE

    def test_endpoint_checked_before_capabilities(self, make_bridge):
        with pytest.raises(InvalidResourceError, match="endpoint"):
            webhook.validate_create(make_bridge(protocol="wss"))

    @pytest.mark.parametrize(
        "port",
        [
            client.V1ServicePort(name="", port=8080),
            client.V1ServicePort(name="-metrics", port=8080),
            client.V1ServicePort(name="metrics--x", port=8080),
            client.V1ServicePort(name="a-very-long-port-name", port=8080),
            client.V1ServicePort(name="Metrics", port=8080),
            client.V1ServicePort(name="1234", port=8080),
            client.V1ServicePort(name="metrics", port=0),
            client.V1ServicePort(name="metrics", port=65536),
        ],
    )
    def test_invalid_ports(self, valid_bridge, port):
        valid_bridge.spec.ports = [port]

        with pytest.raises(InvalidResourceError, match="Ports configuration is incorrect") as exc_info:
            webhook.validate_create(valid_bridge)

        assert exc_info.value.field == "spec.ports"
        assert f"port name '{port.name}'" in str(exc_info.value)


class TestPipeline:
    """Test cases for the bridge admission pipeline."""

    def test_stage_order(self):
        assert webhook.pipeline().stage_names == ["default", "validate"]

    def test_create_allowed(self, valid_bridge):
        response = webhook.pipeline().admit(AdmissionRequest(operation=Operation.CREATE, obj=valid_bridge))

        assert response.allowed is True
        assert response.code == codes.OK
        assert response.obj.spec.replicas == 1
        assert response.obj.spec.upgrade_strategy == UpgradeStrategy.AUTOMATIC
        response.raise_for_status()

    def test_create_denied(self, make_bridge):
        bridge = make_bridge(protocol="wss", capabilities={"AcceptsRemoteConfig": True})

        response = webhook.pipeline().admit(AdmissionRequest(operation=Operation.CREATE, obj=bridge))

        assert response.allowed is False
        assert response.code == codes.INVALID_RESOURCE
        assert "endpoint" in response.message
        assert response.obj is bridge
        with pytest.raises(InvalidResourceError):
            response.raise_for_status()

    def test_update_is_not_revalidated(self, make_bridge, valid_bridge):
        response = webhook.pipeline().admit(
            AdmissionRequest(operation=Operation.UPDATE, obj=make_bridge(), old_obj=valid_bridge)
        )

        assert response.allowed is True
        assert response.obj.spec.replicas == 1

    def test_delete_is_not_defaulted(self, make_bridge):
        bridge = make_bridge()

        response = webhook.pipeline().admit(AdmissionRequest(operation=Operation.DELETE, obj=bridge))

        assert response.allowed is True
        assert response.obj is bridge
        assert response.obj.spec.replicas is None
