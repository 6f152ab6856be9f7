import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from .client import HeaderClient
from .constants import ErrorCode, OutcomeKind
from .evaluator import HeaderResult, evaluate_header
from .exceptions import FileReadError, ParseError, RequestBuildError, TransportError
from .loader import load_spec
from .merge import merge_headers
from .models import HeaderMap, Spec
from .report import format_error, format_header_result, format_url
from .settings import NO_CACHE_HEADERS, ValidatorConfig

logger = logging.getLogger(__name__)

OUTCOME_ERRORS = {
    OutcomeKind.MISSING_OR_UNEXPECTED: ErrorCode.MISSING_RESPONSE_HEADER,
    OutcomeKind.VALUE_MISMATCH: ErrorCode.FAIL_ASSERT_RESPONSE_HEADER_VALUE,
}


@dataclass(frozen=True)
class UrlContinue:
    """The URL was requested; header failures, if any, do not stop the file."""

    errors: list[ErrorCode] = field(default_factory=list)


@dataclass(frozen=True)
class UrlAbort:
    """The request could not be made; remaining URLs of the file are skipped."""

    error: ErrorCode


UrlResult = UrlContinue | UrlAbort


def header_errors(results: list[HeaderResult]) -> list[ErrorCode]:
    return [OUTCOME_ERRORS[result.kind] for result in results if not result.ok]


class SpecValidator:
    """Validates the URLs of spec files against their expected response headers."""

    def __init__(self, config: ValidatorConfig, client: HeaderClient):
        self.config = config
        self.client = client
        self.urls_checked = 0

    def base_request_headers(self) -> HeaderMap:
        """Headers applied to every request before the spec's own headers."""
        if self.config.no_cache:
            return merge_headers(NO_CACHE_HEADERS, self.config.forced_request_headers)
        return dict(self.config.forced_request_headers)

    def validate_spec_file(self, path: str | Path) -> list[ErrorCode]:
        """Validate every spec of one file, in order.

        Returns:
            Error codes in encounter order; empty when every check passed
        """
        try:
            container = load_spec(path)
        except FileReadError as e:
            logger.error(format_error(f"File error: {e.message}"))
            return [ErrorCode.FILE_ERROR]
        except ParseError as e:
            logger.error(format_error(f"Unmarshal error: {e.message}"))
            return [ErrorCode.UNMARSHAL_ERROR]

        errors: list[ErrorCode] = []
        for spec in container.specs:
            match self.validate_url(container.default, spec):
                case UrlAbort(error=error):
                    errors.append(error)
                    break
                case UrlContinue(errors=url_errors):
                    errors.extend(url_errors)

        return errors

    def validate_url(self, default: Spec, spec: Spec) -> UrlResult:
        self.urls_checked += 1
        logger.info(format_url(spec.url))

        request_headers = merge_headers(self.base_request_headers(), default.request_headers, spec.request_headers)
        try:
            response_headers = self.client.send("GET", spec.url, request_headers)
        except RequestBuildError as e:
            logger.error(format_error(f"Invalid request: {e.message}"))
            return UrlAbort(ErrorCode.INVALID_REQUEST)
        except TransportError as e:
            logger.error(format_error(f"Failed request: {e.message}"))
            return UrlAbort(ErrorCode.FAILED_REQUEST)

        expected_headers = merge_headers(default.response_headers, spec.response_headers)
        results = self.check_headers(expected_headers, response_headers)
        return UrlContinue(header_errors(results))

    def check_headers(self, expected_headers: dict[str, list[str]], response_headers: httpx.Headers) -> list[HeaderResult]:
        """Evaluate every expected header, in sorted name order."""
        results: list[HeaderResult] = []
        for name in sorted(expected_headers):
            header_results = evaluate_header(name, expected_headers[name], response_headers.get_list(name))
            for result in header_results:
                if result.ok:
                    logger.info(format_header_result(result))
                else:
                    logger.error(format_header_result(result))
            results.extend(header_results)
        return results
