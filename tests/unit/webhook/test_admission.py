import pytest

from otelop._codes import codes
from otelop.common.exceptions import ManifestBuildError, OperatorException
from otelop.webhook import (
    AdmissionPipeline,
    AdmissionRequest,
    AdmissionResponse,
    DefaultingStage,
    Operation,
    ValidatingStage,
)


def _noop(*args):
    return None


class TestAdmissionPipeline:
    def test_validator_sees_defaulted_object(self):
        seen = []

        def validate(obj):
            seen.append(obj)

        pipeline = AdmissionPipeline(
            [DefaultingStage(lambda obj: obj + "-defaulted"), ValidatingStage(validate, _noop, _noop)]
        )

        response = pipeline.admit(AdmissionRequest(operation=Operation.CREATE, obj="bridge"))

        assert seen == ["bridge-defaulted"]
        assert response.obj == "bridge-defaulted"

    def test_update_passes_old_object(self):
        seen = []
        pipeline = AdmissionPipeline([ValidatingStage(_noop, lambda old, new: seen.append((old, new)), _noop)])

        pipeline.admit(AdmissionRequest(operation=Operation.UPDATE, obj="new", old_obj="old"))

        assert seen == [("old", "new")]

    def test_exception_code_is_kept(self):
        def fail(obj):
            raise ManifestBuildError("boom")

        response = AdmissionPipeline([ValidatingStage(fail, _noop, _noop)]).admit(
            AdmissionRequest(operation=Operation.CREATE, obj="x")
        )

        assert response.allowed is False
        assert response.code == codes.MANIFEST_BUILD_ERROR
        assert response.message == "boom"

    def test_exception_without_code_is_invalid_resource(self):
        def fail(obj):
            raise OperatorException("nope")

        response = AdmissionPipeline([DefaultingStage(fail)]).admit(
            AdmissionRequest(operation=Operation.CREATE, obj="x")
        )

        assert response.allowed is False
        assert response.code == codes.INVALID_RESOURCE

    def test_later_stages_do_not_run_after_denial(self):
        calls = []

        def fail(obj):
            raise OperatorException("nope")

        pipeline = AdmissionPipeline(
            [ValidatingStage(fail, _noop, _noop), DefaultingStage(lambda obj: calls.append(obj))]
        )
        pipeline.admit(AdmissionRequest(operation=Operation.CREATE, obj="x"))

        assert calls == []

    def test_other_exceptions_propagate(self):
        def crash(obj):
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            AdmissionPipeline([DefaultingStage(crash)]).admit(AdmissionRequest(operation=Operation.CREATE, obj="x"))


def test_allowed_response_does_not_raise():
    AdmissionResponse(allowed=True, obj=None).raise_for_status()
