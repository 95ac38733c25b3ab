from __future__ import annotations

from enum import IntEnum

__all__ = ["codes"]


class codes(IntEnum):
    """
    Operator status codes enumeration.

    Each member carries an integer value and a human-readable phrase. The
    admission pipeline reports these codes in its responses, and every
    operator exception is tagged with one of them.
    """

    _ignore_ = ["phrase"]
    phrase: str = ""

    def __new__(cls, value: int, phrase: str = "") -> codes:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.phrase = phrase
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def get_reason_phrase(cls, value: int) -> str:
        """
        Get the reason phrase for a given status code value.

        Example:
            >>> codes.get_reason_phrase(2000)
            'OK'
            >>> codes.get_reason_phrase(9999)
            ''
        """
        try:
            return codes(value).phrase
        except ValueError:
            return ""

    @classmethod
    def is_success(cls, value: int) -> bool:
        return 2000 <= value <= 2999

    @classmethod
    def is_client_error(cls, value: int) -> bool:
        """True for codes caused by the submitted resource (4xxx)."""
        return 4000 <= value <= 4999

    @classmethod
    def is_server_error(cls, value: int) -> bool:
        """True for codes caused by the operator itself (5xxx)."""
        return 5000 <= value <= 5999

    OK = 2000, "OK"

    INVALID_RESOURCE = 4000, "Invalid Resource"
    """
    The resource failed a structural precondition and must not be admitted.
    """

    UNSUPPORTED_RESOURCE = 4001, "Unsupported Resource"

    MANIFEST_BUILD_ERROR = 5000, "Manifest Build Error"
    """
    A dependent object could not be built. Workload builders degrade instead
    of failing when they see this.
    """


# Include lower-case styles for `requests` compatibility.
for code in codes:
    setattr(codes, code._name_.lower(), int(code))
