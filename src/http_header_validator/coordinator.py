import logging
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path

from .client import HeaderClient
from .constants import DEFAULT_SPEC_FILE, ErrorCode
from .report import format_summary
from .settings import ValidatorConfig
from .validator import SpecValidator

logger = logging.getLogger(__name__)

USAGE = f"""usage: validate-http-headers [SPECFILE ...]

Validates the response headers of the URLs listed in each JSON spec file.
Without arguments, {DEFAULT_SPEC_FILE} in the current directory is used.

Spec file format:
  {{
    "default": {{"requestHeaders": {{"Name": ["value"]}}, "responseHeaders": {{"Name": ["value"]}}}},
    "specs": [{{"url": "https://example.com/", "requestHeaders": {{}}, "responseHeaders": {{}}}}]
  }}

A response header expected as [""] must be absent."""


def exit_status(errors: Sequence[ErrorCode]) -> int:
    """First error code encountered, or 0 when there is none."""
    return int(errors[0]) if errors else 0


def run(
    file_names: Sequence[str | Path],
    config: ValidatorConfig | None = None,
    client: HeaderClient | None = None,
    default_spec_file: str | Path = DEFAULT_SPEC_FILE,
    usage: str = USAGE,
) -> int:
    """Validate spec files in order and return the process exit status.

    A failing file never stops the remaining files from being validated.
    The client is closed at the end of the run unless it was passed in.
    """
    config = config or ValidatorConfig()

    if not file_names:
        if not Path(default_spec_file).exists():
            print(usage)
            return 0
        file_names = [default_spec_file]

    errors: list[ErrorCode] = []
    with ExitStack() as stack:
        if client is None:
            client = stack.enter_context(HeaderClient(config))
        validator = SpecValidator(config, client)

        for file_name in file_names:
            logger.debug(f"Validating spec file {file_name}")
            errors.extend(validator.validate_spec_file(file_name))

    summary = format_summary(len(file_names), validator.urls_checked, len(errors))
    if errors:
        logger.error(summary)
    else:
        logger.info(summary)

    return exit_status(errors)
