from collections.abc import Sequence
from dataclasses import dataclass, field

from .constants import OutcomeKind

ABSENT_MARKER = ""


@dataclass(frozen=True)
class HeaderResult:
    """Outcome of one header check.

    ``index`` is the compared value position, or ``None`` when the result
    covers the whole header (count mismatch, or correctly absent).
    """

    kind: OutcomeKind
    header: str
    index: int | None = None
    expected: list[str] = field(default_factory=list)
    actual: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


def expected_count(expected: Sequence[str]) -> int:
    """Number of values the header must have; ``[""]`` means it must be absent."""
    if len(expected) == 1 and expected[0] == ABSENT_MARKER:
        return 0
    return len(expected)


def evaluate_header(header: str, expected: Sequence[str], actual: Sequence[str]) -> list[HeaderResult]:
    """Compare the expected values of one header against the response values.

    A count mismatch yields a single MISSING_OR_UNEXPECTED result and no
    positional checks. Otherwise every position is compared and reported.
    """
    expected = list(expected)
    actual = list(actual)
    count = expected_count(expected)

    if len(actual) != count:
        return [HeaderResult(OutcomeKind.MISSING_OR_UNEXPECTED, header, expected=expected, actual=actual)]

    if count == 0:
        return [HeaderResult(OutcomeKind.SUCCESS, header, expected=expected, actual=actual)]

    results = []
    for i in range(count):
        kind = OutcomeKind.SUCCESS if expected[i] == actual[i] else OutcomeKind.VALUE_MISMATCH
        results.append(HeaderResult(kind, header, index=i, expected=[expected[i]], actual=[actual[i]]))
    return results
