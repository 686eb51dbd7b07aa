"""
Project collaborators: everything around the pipeline that touches a Flutter project on disk.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, OutputExistsError
from .build_runner import BuildRunnerError, run_build_runner
from .flutter_project import (
    ProjectRootNotFound,
    ensure_json_converter,
    find_project_root,
    output_file_name,
    relative_import_path,
    render_json_converter,
)

__all__ = [
    "AtomicWriter",
    "BuildRunnerError",
    "OutputExistsError",
    "ProjectRootNotFound",
    "ensure_json_converter",
    "find_project_root",
    "output_file_name",
    "relative_import_path",
    "render_json_converter",
    "run_build_runner",
]
