from http_header_validator.client import HeaderClient
from http_header_validator.constants import ErrorCode, OutcomeKind
from http_header_validator.coordinator import run
from http_header_validator.evaluator import HeaderResult, evaluate_header
from http_header_validator.exceptions import (
    ClientError,
    FileReadError,
    HeaderValidatorError,
    ParseError,
    RequestBuildError,
    SpecLoadError,
    TransportError,
)
from http_header_validator.loader import load_spec
from http_header_validator.merge import merge_headers
from http_header_validator.models import HeaderMap, Spec, SpecContainer
from http_header_validator.settings import Settings, ValidatorConfig
from http_header_validator.validator import SpecValidator, UrlAbort, UrlContinue

__all__ = [
    "ClientError",
    "ErrorCode",
    "FileReadError",
    "HeaderClient",
    "HeaderMap",
    "HeaderResult",
    "HeaderValidatorError",
    "OutcomeKind",
    "ParseError",
    "RequestBuildError",
    "Settings",
    "Spec",
    "SpecContainer",
    "SpecLoadError",
    "SpecValidator",
    "TransportError",
    "UrlAbort",
    "UrlContinue",
    "ValidatorConfig",
    "evaluate_header",
    "load_spec",
    "merge_headers",
    "run",
]
