"""Spec file loading."""

import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import FileReadError, ParseError
from .models import SpecContainer

logger = logging.getLogger(__name__)


def load_spec(path: str | Path) -> SpecContainer:
    """Read and validate a spec file.

    Args:
        path: Path to the JSON spec file

    Returns:
        The parsed spec container

    Raises:
        FileReadError: If the file cannot be read or decoded
        ParseError: If the file is not valid JSON or does not match the spec format
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Cannot read spec file {path}: {str(e)}") from None

    try:
        container = SpecContainer.model_validate_json(content)
    except ValidationError as e:
        error_details = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"]) or "<root>"
            error_details.append(f"  - {loc}: {error['msg']}")
        raise ParseError(f"Cannot parse spec file {path}:\n" + "\n".join(error_details)) from None

    logger.debug(f"Loaded {len(container.specs)} spec(s) from {path}")
    return container
