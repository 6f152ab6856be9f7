"""Exception classes for http-header-validator."""


class HeaderValidatorError(Exception):
    """Base exception for all http-header-validator errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SpecLoadError(HeaderValidatorError):
    """An error loading a spec file."""


class FileReadError(SpecLoadError):
    """The spec file could not be read."""


class ParseError(SpecLoadError):
    """The spec file is not valid JSON or does not match the spec format."""


class ClientError(HeaderValidatorError):
    """An error making HTTP call."""


class RequestBuildError(ClientError):
    """The request could not be constructed."""


class TransportError(ClientError):
    """The request could not be sent or the response could not be received."""
