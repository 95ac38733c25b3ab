from ._codes import codes
from .common.exceptions import (
    InvalidResourceError,
    ManifestBuildError,
    OperatorException,
    UnsupportedResourceError,
    raise_for_code,
)

__all__ = [
    "codes",
    "OperatorException",
    "InvalidResourceError",
    "UnsupportedResourceError",
    "ManifestBuildError",
    "raise_for_code",
]
