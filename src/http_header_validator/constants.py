from enum import IntEnum, StrEnum

DEFAULT_SPEC_FILE = "urls.json"

ENV_PREFIX = "VALIDATE_HTTP_HEADERS_"


class ErrorCode(IntEnum):
    """Failure kinds, surfaced as the process exit status.

    Values are fixed: the run reports the first code encountered.
    """

    FILE_ERROR = 1
    UNMARSHAL_ERROR = 2
    INVALID_REQUEST = 3
    FAILED_REQUEST = 4
    MISSING_RESPONSE_HEADER = 5
    FAIL_ASSERT_RESPONSE_HEADER_VALUE = 6


class OutcomeKind(StrEnum):
    """Result of checking one header, or one value position of a header."""

    SUCCESS = "success"
    MISSING_OR_UNEXPECTED = "missing_or_unexpected"
    VALUE_MISMATCH = "value_mismatch"
