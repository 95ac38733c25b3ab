"""Unit tests for compiling resources into their objects."""

import pytest
from kubernetes import client

from otelop.apis import Mode
from otelop.apis.common import CustomResource, ObjectMeta
from otelop.common.exceptions import ManifestBuildError, UnsupportedResourceError
from otelop.manifests import builder, serialize


class TestBuild:
    def test_build_opamp_bridge(self, operator_config, valid_bridge):
        objects = builder.build(operator_config, valid_bridge)

        assert [type(o) for o in objects] == [client.V1ConfigMap, client.V1Deployment]
        cm, deployment = objects
        # the volume points at the ConfigMap built alongside
        assert deployment.spec.template.spec.volumes[0].config_map.name == cm.metadata.name

    def test_build_collector_deployment(self, operator_config, make_collector):
        objects = builder.build(operator_config, make_collector())

        assert [o.kind for o in objects] == ["ConfigMap", "Deployment"]

    def test_build_collector_daemonset(self, operator_config, make_collector):
        objects = builder.build(operator_config, make_collector(mode=Mode.DAEMONSET))

        assert [o.kind for o in objects] == ["ConfigMap", "DaemonSet"]

    def test_build_collector_with_target_allocator(self, operator_config, ta_collector):
        objects = builder.build(operator_config, ta_collector)

        assert [(o.kind, o.metadata.name) for o in objects] == [
            ("ConfigMap", "my-instance-collector"),
            ("Deployment", "my-instance-collector"),
            ("ConfigMap", "my-instance-targetallocator"),
            ("Deployment", "my-instance-targetallocator"),
        ]

    def test_build_target_allocator_without_prometheus(self, operator_config, make_collector, otlp_collector_config):
        otelcol = make_collector(config=otlp_collector_config, target_allocator={"enabled": True})

        with pytest.raises(ManifestBuildError):
            builder.build(operator_config, otelcol)

    def test_build_unsupported_kind(self, operator_config):
        resource = CustomResource(kind="Instrumentation", metadata=ObjectMeta(name="x"))

        with pytest.raises(UnsupportedResourceError):
            builder.build(operator_config, resource)

    def test_serialized_output(self, operator_config, valid_bridge):
        cm, deployment = serialize(builder.build(operator_config, valid_bridge))

        assert cm["apiVersion"] == "v1"
        assert cm["kind"] == "ConfigMap"
        assert deployment["apiVersion"] == "apps/v1"
        pod = deployment["spec"]["template"]["spec"]
        assert pod["dnsPolicy"] == "ClusterFirst"
        assert pod["containers"][0]["ports"] == [{"containerPort": 8080, "name": "metrics"}]
