import json
import logging
import re
from pathlib import Path

import click

from .pipeline import CodeGeneratorConfig, FieldOverride, GenerationError, OutputConfig, OutputMode, PipelineGenerator
from .project import (
    AtomicWriter,
    BuildRunnerError,
    OutputExistsError,
    ensure_json_converter,
    find_project_root,
    output_file_name,
    relative_import_path,
    run_build_runner,
)
from .utils import ensure_entity_suffix, to_pascal_case

_DART_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def resolve_class_name(raw_name: str, entity_suffix: bool = True) -> str:
    """Turn the user-supplied class name into a PascalCase Dart identifier."""
    raw_name = raw_name.strip()
    if not raw_name:
        raise click.ClickException("Class name is required.")

    if entity_suffix:
        raw_name = ensure_entity_suffix(raw_name)

    class_name = to_pascal_case(raw_name)
    if not class_name or not _DART_IDENTIFIER.match(class_name):
        raise click.ClickException("Class name must be a valid Dart identifier.")
    return class_name


def load_json_object(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        text = f.read().strip()

    if not text:
        raise click.ClickException("JSON text is required.")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise click.ClickException("JSON must be an object (top-level map).")
    return data


def read_json_file(path: Path):
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON in {path.name}: {e}") from e


def load_config(path: Path) -> CodeGeneratorConfig:
    data = read_json_file(path)
    if not isinstance(data, dict):
        raise click.ClickException("Config must be a JSON object.")

    try:
        return CodeGeneratorConfig.from_dict(data)
    except ValueError as e:
        raise click.ClickException(f"Invalid config: {e}") from e


def load_overrides(path: Path) -> list[FieldOverride]:
    data = read_json_file(path)

    if not isinstance(data, list):
        raise click.ClickException("Field overrides must be a JSON list.")

    try:
        return [FieldOverride.from_dict(item) for item in data]
    except (TypeError, ValueError, AttributeError) as e:
        raise click.ClickException(f"Invalid field override: {e}") from e


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root class name (defaults to the input file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--nullable", is_flag=True, default=False, help="Make every field nullable")
@click.option("--defaults", "use_defaults", is_flag=True, default=False, help="Generate @Default values")
@click.option(
    "--overrides",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="JSON list of per-field overrides for root-level keys",
)
@click.option("--entity-suffix/--no-entity-suffix", default=True, help="Append _entity to the class name")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing output file")
@click.option("--build-runner/--no-build-runner", default=False, help="Run build_runner after writing")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output_dir", default=None, type=click.Path(file_okay=False, resolve_path=True))
def json_to_freezed(name, config, nullable, use_defaults, overrides, entity_suffix, force, build_runner, verbose, path, output_dir):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    path = Path(path)
    output_dir = Path(output_dir)

    data = load_json_object(path)

    if name is None:
        name = path.stem
    class_name = resolve_class_name(name, entity_suffix)

    if config is not None:
        config = load_config(Path(config))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file when set
    if nullable:
        config.make_nullable = True
    if use_defaults:
        config.use_default_values = True

    field_overrides = load_overrides(Path(overrides)) if overrides is not None else None

    output_config = OutputConfig(mode=OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS)

    try:
        project_root = find_project_root(output_dir)
        try:
            converter_file = ensure_json_converter(project_root)
        except OSError as e:
            raise click.ClickException(f"Failed to prepare json_value_converter.dart: {e}") from e
        converter_import = relative_import_path(output_dir, converter_file)

        codegen = PipelineGenerator(class_name, data, config, converter_import, field_overrides)
        out = codegen.generate()

        output_file = output_dir / output_file_name(class_name)
        writer = AtomicWriter(output_config.mode)
        try:
            writer.write(output_file, out, validate=output_config.validate_before_write)
        except OutputExistsError:
            raise
        except OSError as e:
            raise click.ClickException(f"Failed to write {output_file.name}: {e}") from e
        click.echo(f"Generated {output_file.name}")

        if build_runner:
            click.echo("Running build_runner...")
            try:
                run_build_runner(project_root)
            except BuildRunnerError as e:
                raise click.ClickException(f"build_runner failed: {e}") from e
            click.echo("build_runner completed.")
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
