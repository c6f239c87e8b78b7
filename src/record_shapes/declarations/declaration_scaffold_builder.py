"""Schema declaration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_DECLARATION_FILENAME = "schemas.yaml"

_DECLARATION_SCAFFOLD_TEMPLATE = """# Schema declaration file for record-shapes.
# Every entry under `schemas` declares one schema; its keys are the field names.
# Leaf kinds: text, number, boolean, map, list.
# Any other string names a schema declared in this file (nesting).
# `{collection: <schema>}` declares a homogeneous collection of that schema.

schemas:
  address:
    address_1: text
    address_2: text
    city: text

  customer:
    name: text
    is_verified: boolean
    address: address

  order:
    total: number
    notes: list
    metadata: map
    customer: customer
    shipping_addresses:
      collection: address
"""


def build_placeholder_declaration() -> str:
    """Build an example schema declaration file with inline guidance."""
    return _DECLARATION_SCAFFOLD_TEMPLATE


def write_placeholder_declaration(output_path: Path | str) -> Path:
    """Write the example schema declaration file to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Schema declaration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_declaration(), encoding="utf-8")
    return destination.resolve()
