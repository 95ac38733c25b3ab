import pytest

from otelop import (
    InvalidResourceError,
    ManifestBuildError,
    OperatorException,
    UnsupportedResourceError,
    codes,
    raise_for_code,
)


class TestExceptions:
    def test_default_codes(self):
        assert OperatorException("x").code is None
        assert InvalidResourceError("x").code == codes.INVALID_RESOURCE
        assert UnsupportedResourceError("x").code == codes.UNSUPPORTED_RESOURCE
        assert ManifestBuildError("x").code == codes.MANIFEST_BUILD_ERROR

    def test_invalid_resource_field(self):
        e = InvalidResourceError("the OpAMP server endpoint is not specified", field="spec.endpoint")

        assert e.field == "spec.endpoint"
        assert str(e) == "the OpAMP server endpoint is not specified"
        assert isinstance(e, OperatorException)


class TestRaiseForCode:
    @pytest.mark.parametrize("code", [None, codes.OK, 2001])
    def test_success_does_not_raise(self, code):
        raise_for_code(code, "fine")

    @pytest.mark.parametrize(
        "code, exc_type",
        [
            (codes.INVALID_RESOURCE, InvalidResourceError),
            (codes.UNSUPPORTED_RESOURCE, UnsupportedResourceError),
            (4999, InvalidResourceError),
            (codes.MANIFEST_BUILD_ERROR, ManifestBuildError),
            (5999, ManifestBuildError),
        ],
    )
    def test_error_codes(self, code, exc_type):
        with pytest.raises(exc_type, match="went wrong"):
            raise_for_code(code, "went wrong")

    def test_unknown_code(self):
        with pytest.raises(OperatorException) as exc_info:
            raise_for_code(7000, "odd")

        assert type(exc_info.value) is OperatorException
        assert exc_info.value.code == 7000
