from otelop._codes import codes


class OperatorException(Exception):
    _code: codes = None

    def __init__(self, message, code: codes = None):
        super().__init__(message)
        self._code = code

    @property
    def code(self):
        return self._code


class InvalidResourceError(OperatorException):
    """Raised when a resource fails admission validation.

    ``field`` is the path of the offending field, e.g. ``spec.endpoint``.
    """

    def __init__(self, message, field: str | None = None, code: codes = codes.INVALID_RESOURCE):
        super().__init__(message, code)
        self.field = field


class UnsupportedResourceError(OperatorException):
    def __init__(self, message, code: codes = codes.UNSUPPORTED_RESOURCE):
        super().__init__(message, code)


class ManifestBuildError(OperatorException):
    def __init__(self, message, code: codes = codes.MANIFEST_BUILD_ERROR):
        super().__init__(message, code)


def raise_for_code(code: codes, message: str):
    if code is None or codes.is_success(code):
        return

    if code == codes.UNSUPPORTED_RESOURCE:
        raise UnsupportedResourceError(message)
    if codes.is_client_error(code):
        raise InvalidResourceError(message)
    if codes.is_server_error(code):
        raise ManifestBuildError(message)

    raise OperatorException(message, code=code)
