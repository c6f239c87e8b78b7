"""Schema declaration file exports."""

from .declaration_loader import DeclarationFileError, load_registry, parse_registry
from .declaration_scaffold_builder import (
    DEFAULT_DECLARATION_FILENAME,
    build_placeholder_declaration,
    write_placeholder_declaration,
)

__all__ = [
    "DEFAULT_DECLARATION_FILENAME",
    "DeclarationFileError",
    "build_placeholder_declaration",
    "load_registry",
    "parse_registry",
    "write_placeholder_declaration",
]
