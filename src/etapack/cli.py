"""Etapack CLI

Compile Eta templates into ES modules outside a bundler, mostly to inspect
what the plugin emits.

Usage:
    etapack build src/templates -o build/templates   # Transform a whole tree
    etapack build -c etapack.yaml -o out -j 4         # Options from YAML, 4 workers
    etapack transform src/templates/page.eta          # Print one module
    etapack config                                     # Print the virtual config module
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from etapack._version import __version__
from etapack.exceptions import EtapackError
from etapack.options import PluginOptions, load_options, make_options
from etapack.plugin import EtaPlugin
from etapack.virtual import internal_config_source

log = logging.getLogger(__name__)

console = Console(stderr=True)

typer_app = typer.Typer(help="Compile Eta templates into ES modules.")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the etapack CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - one line per written module
    - Debug (ETAPACK_DEBUG=1): DEBUG level - partial claims per file
    """
    if os.environ.get("ETAPACK_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=bool(os.environ.get("ETAPACK_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("etapack")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def _options(
    templates_dir: Optional[Path],
    config: Optional[Path],
    include: Optional[List[str]],
    exclude: Optional[List[str]],
) -> PluginOptions:
    """Merge a YAML config file with command line overrides."""
    data = load_options(config).model_dump(by_alias=True) if config else {}
    if templates_dir is not None:
        data["templatesDir"] = str(templates_dir.resolve())
    if include:
        data["include"] = include
    if exclude:
        data["exclude"] = exclude
    if "templatesDir" not in data:
        raise EtapackError("No templates directory given (argument or --config)")
    return make_options(data)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"etapack {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Compile Eta templates into ES modules."""


@typer_app.command()
def build(
    templates_dir: Optional[Path] = typer.Argument(
        None, help="Templates root (overrides templatesDir from --config)."
    ),
    output: Path = typer.Option(
        Path("build"), "-o", "--output", help="Directory to write modules to."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to an etapack.yaml options file."
    ),
    include: Optional[List[str]] = typer.Option(
        None, "-i", "--include", help="Glob of files to transform (repeatable)."
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "-e", "--exclude", help="Glob of files to skip (repeatable)."
    ),
    jobs: int = typer.Option(1, "-j", "--jobs", min=1, help="Parallel transforms."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each module."),
) -> None:
    """Transform every template under the templates root.

    Each module is written to OUTPUT under the template's relative path with
    a `.js` suffix added. A failing template is reported and skipped; the
    command exits non-zero if any template failed.
    """
    setup_logging(verbose)
    try:
        options = _options(templates_dir, config, include, exclude)
    except (EtapackError, FileNotFoundError) as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    plugin = EtaPlugin(options)
    root = Path(plugin.templates_root)
    files = sorted(p for p in root.rglob("*") if p.is_file() and plugin.filter(str(p)))

    def run(path: Path) -> Optional[bool]:
        try:
            module = plugin.transform(path.read_text(encoding="utf-8"), str(path))
        except (EtapackError, UnicodeDecodeError) as exc:
            log.error("%s: %s", path, exc)
            return False
        if module is None:
            return None
        target = output / f"{path.relative_to(root)}.js"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(module, encoding="utf-8")
        log.info("Wrote %s", target)
        return True

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        results = list(executor.map(run, files))

    failed = results.count(False)
    if failed:
        typer.secho(f"{failed} template(s) failed", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {results.count(True)} module(s) to {output}")


@typer_app.command()
def transform(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Template file."),
    templates_dir: Optional[Path] = typer.Option(
        None, "-t", "--templates-dir", help="Templates root (defaults to the file's directory)."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to an etapack.yaml options file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
) -> None:
    """Print the module generated for a single template."""
    setup_logging(verbose)
    file = file.resolve()
    if templates_dir is None and config is None:
        templates_dir = file.parent

    try:
        plugin = EtaPlugin(_options(templates_dir, config, None, None))
        module = plugin.transform(file.read_text(encoding="utf-8"), str(file))
    except (EtapackError, FileNotFoundError) as exc:
        typer.secho(f"Error: {file}: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if module is None:
        typer.secho(f"{file} is not matched by the include/exclude filter", err=True)
        raise typer.Exit(code=1)
    typer.echo(module)


@typer_app.command("config")
def show_config() -> None:
    """Print the source of the virtual config module."""
    typer.echo(internal_config_source())


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
