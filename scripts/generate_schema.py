#!/usr/bin/env python3
"""Write the JSON Schema of the spec file format for IDE support.

Run with: uv run python scripts/generate_schema.py

The schema is written to docs/schema/spec-file.schema.json
"""

import json
import subprocess
from pathlib import Path

from http_header_validator.models import spec_file_schema


def find_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    try:
        result = subprocess.run(["git", "rev-parse", "--show-toplevel"], capture_output=True, text=True, check=True)
        return Path(result.stdout.strip())
    except (subprocess.CalledProcessError, FileNotFoundError):
        pass

    current = Path.cwd()
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise RuntimeError("Could not find project root (no pyproject.toml found)")


def main():
    schema = spec_file_schema()

    output_path = find_project_root() / "docs" / "schema" / "spec-file.schema.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(schema, f, indent=2)

    print(f"Schema written to: {output_path}")


if __name__ == "__main__":
    main()
