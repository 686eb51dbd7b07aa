"""
Flutter project helpers.

Locates the project root, provides the coercion converter module and
computes import paths for generated files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import jinja2

from ..pipeline.backends.base import TEMPLATE_ROOT
from ..pipeline.backends.freezed_backend import FreezedBackend
from ..pipeline.errors import GenerationError

logger = logging.getLogger(__name__)

PUBSPEC_FILE = "pubspec.yaml"

# Location of the converter module, relative to the project root
CONVERTER_RELATIVE_PATH = Path("lib") / "generate" / "json_value_converter.dart"

CONVERTER_TEMPLATE = "json_value_converter.dart.jinja2"


class ProjectRootNotFound(GenerationError):
    """Raised when no pubspec.yaml is found above the output directory."""

    pass


def find_project_root(start: Path) -> Path:
    """
    Find the Flutter project root containing start.

    Args:
        start: Directory (or file) inside the project

    Returns:
        The nearest directory, start included, that contains pubspec.yaml

    Raises:
        ProjectRootNotFound: If no ancestor contains pubspec.yaml
    """
    start = start.resolve()
    if start.is_file():
        start = start.parent

    for directory in (start, *start.parents):
        if (directory / PUBSPEC_FILE).is_file():
            return directory

    raise ProjectRootNotFound("Unable to locate Flutter project root (pubspec.yaml).")


def render_json_converter() -> str:
    """Return the content of the json_value_converter.dart module."""
    env = jinja2.Environment(loader=jinja2.FileSystemLoader(str(TEMPLATE_ROOT / "dart")), keep_trailing_newline=True)
    return env.get_template(CONVERTER_TEMPLATE).render()


def ensure_json_converter(project_root: Path) -> Path:
    """
    Create lib/generate/json_value_converter.dart if it does not exist yet.

    An existing file is never overwritten, so local edits survive.

    Args:
        project_root: The Flutter project root

    Returns:
        Path of the converter module
    """
    converter_file = project_root / CONVERTER_RELATIVE_PATH
    if converter_file.exists():
        return converter_file

    converter_file.parent.mkdir(parents=True, exist_ok=True)
    converter_file.write_text(render_json_converter(), encoding="utf-8")
    logger.info("Created %s", converter_file)
    return converter_file


def relative_import_path(from_dir: Path, target_file: Path) -> str:
    """
    Compute a Dart relative import from a directory to a file.

    Examples:
        lib/models -> lib/generate/json_value_converter.dart: "../generate/json_value_converter.dart"
        lib/generate -> lib/generate/json_value_converter.dart: "./json_value_converter.dart"

    Args:
        from_dir: Directory of the importing file
        target_file: The imported file

    Returns:
        POSIX-style relative path starting with "."
    """
    relative = Path(os.path.relpath(target_file.resolve(), from_dir.resolve())).as_posix()
    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative


def output_file_name(class_name: str) -> str:
    """Name of the generated file for a root class ("UserEntity" -> "user_entity.dart")."""
    return f"{FreezedBackend.file_stem(class_name)}.dart"
