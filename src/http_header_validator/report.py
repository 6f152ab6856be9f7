"""Human-readable result lines.

Successful checks are prefixed with ``PASS``, failed header checks with
``FAIL`` and request or file problems with ``ERROR``.
"""

from .constants import OutcomeKind
from .evaluator import HeaderResult, expected_count

PASS = "PASS"
FAIL = "FAIL"
ERROR = "ERROR"


def format_url(url: str) -> str:
    return f"URL: {url}"


def format_header_result(result: HeaderResult) -> str:
    match result.kind:
        case OutcomeKind.SUCCESS if result.index is None:
            return f"{PASS} {result.header}: correctly absent"

        case OutcomeKind.SUCCESS:
            return f"{PASS} {result.header}[{result.index}]: '{result.expected[0]}'"

        case OutcomeKind.MISSING_OR_UNEXPECTED:
            count = expected_count(result.expected)
            if count == 0:
                return f"{FAIL} {result.header}: expected header to be absent, got {result.actual}"
            return f"{FAIL} {result.header}: expected {count} value(s) {result.expected}, got {len(result.actual)} value(s) {result.actual}"

        case OutcomeKind.VALUE_MISMATCH:
            return f"{FAIL} {result.header}[{result.index}]: expected '{result.expected[0]}' instead of '{result.actual[0]}'"


def format_error(message: str) -> str:
    return f"{ERROR} {message}"


def format_summary(files: int, urls: int, errors: int) -> str:
    status = PASS if errors == 0 else FAIL
    return f"{status} {files} file(s), {urls} URL(s) checked, {errors} error(s)"
