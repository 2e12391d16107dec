"""
Command-line interface for resource code generation.

Usage:
  resx-generator path/to/Project.csproj
  resx-generator path/to/project --root-namespace App --output generated/
  resx-generator --list-languages
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .builder import FileOutcome, ResourceBuilder, write_outputs
from .codegen import (
    BuildSettings,
    ConfigError,
    RegistryError,
    list_all_language_info,
    load_config,
)
from .logging_config import get_logger, setup_logging
from .utils import (
    ProjectFileError,
    find_project_file,
    find_resource_files,
    load_project_settings,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="resx-generator",
        description="Generate strongly typed accessors for .resx resource files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resx-generator src/App/App.csproj
  resx-generator src/App --root-namespace App --output obj/generated
  resx-generator src/App --language python --output app/resources
  resx-generator --list-languages
        """.strip(),
    )

    parser.add_argument(
        "project",
        nargs="?",
        help="Project file (.csproj) or project directory",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Project settings
    project_group = parser.add_argument_group("project settings")
    project_group.add_argument(
        "--root-namespace",
        metavar="NAMESPACE",
        help="Root namespace (default: RootNamespace of the project file, or its name)",
    )
    project_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file"
    )

    # Generation options
    generation_group = parser.add_argument_group("generation options")
    generation_group.add_argument(
        "--language",
        "-l",
        help="Target language (default: csharp; use --list-languages to see options)",
    )
    generation_group.add_argument(
        "--public-class",
        action="store_true",
        default=None,
        help="Declare generated classes public instead of internal",
    )
    generation_group.add_argument(
        "--null-forgiving-operators",
        action="store_true",
        default=None,
        help="Declare accessors non-nullable and assert lookup results",
    )
    generation_group.add_argument(
        "--static-class",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate static classes (default) or instantiable ones",
    )

    # Output options
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        help="Directory for generated files (default: print to stdout)",
    )
    output_group.add_argument(
        "--jobs",
        "-j",
        type=int,
        metavar="N",
        help="Number of files generated in parallel (default: CPU count)",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging and show generation details",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )

    return parser


class CLIHandler:
    """Handle command-line operations for resource code generation."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler."""
        self.console = console or Console()
        logger.debug("CLIHandler initialized")

    def run(self, args: Any) -> int:
        """Run the command described by parsed arguments.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if getattr(args, "list_languages", False):
            return self._handle_list_languages()

        if args.jobs is not None and args.jobs < 1:
            self.console.print("[red]✗ --jobs must be at least 1[/red]")
            return 1

        try:
            settings = self._load_settings(args)
            resource_files = find_resource_files(settings.project_dir)
            builder = ResourceBuilder(
                settings, language=args.language, max_workers=args.jobs
            )
        except (CLIError, ConfigError, ProjectFileError, RegistryError) as e:
            self.console.print(f"[red]✗ Error:[/red] {e}")
            logger.error("Setup failed: %s", e)
            return 1
        except FileNotFoundError as e:
            self.console.print(f"[red]✗ {e}[/red]")
            return 1

        outcomes = builder.build(resource_files)
        if not outcomes:
            self.console.print("[yellow]⚠️  No resource files to generate[/yellow]")
            return 0

        if args.output:
            return self._handle_write(outcomes, Path(args.output), args)
        return self._handle_print(outcomes, builder.generator.language_name, args)

    def _load_settings(self, args: Any) -> BuildSettings:
        """Merge project file, config file and command-line settings."""
        if not args.project:
            raise CLIError("A project file or directory is required")

        project = Path(args.project)
        if not project.exists():
            raise CLIError(f"Project not found: {project}")

        defaults: dict[str, Any] = {}
        project_file = find_project_file(project)
        if project_file is not None:
            defaults = load_project_settings(project_file)
        elif project.is_dir():
            defaults = {"project_dir": str(project.resolve())}

        overrides = {
            "project_dir": str(project.resolve()) if project.is_dir() else None,
            "root_namespace": args.root_namespace,
            "language": args.language,
            "public_class": args.public_class,
            "null_forgiving_operators": args.null_forgiving_operators,
            "static_class": args.static_class,
        }

        settings = load_config(overrides, config_file=args.config, defaults=defaults)

        if settings.root_namespace is None:
            raise CLIError(
                f"No project file in {project}; pass --root-namespace to set the "
                "root namespace"
            )

        logger.info(
            "Project directory %s, root namespace '%s'",
            settings.project_dir,
            settings.root_namespace,
        )
        return settings

    def _handle_print(
        self, outcomes: list[FileOutcome], language: str, args: Any
    ) -> int:
        """Print generated code with syntax highlighting."""
        for outcome in outcomes:
            if not outcome.success:
                continue

            self.console.print(
                Panel(
                    f"[bold]{outcome.identity}[/bold]  [dim]{outcome.path}[/dim]",
                    border_style="green",
                )
            )
            if self.console.is_terminal:
                self.console.print(Syntax(outcome.result.code, language, theme="monokai"))
            else:
                self.console.out(outcome.result.code, end="", highlight=False)

        return self._report(outcomes, args)

    def _handle_write(
        self, outcomes: list[FileOutcome], output_dir: Path, args: Any
    ) -> int:
        """Write generated files and print a summary table."""
        try:
            written = write_outputs(outcomes, output_dir)
        except OSError as e:
            self.console.print(f"[red]✗ Failed to write to {output_dir}:[/red] {e}")
            logger.error("Failed to write outputs: %s", e)
            return 1

        self.console.print(
            f"[green]✓[/green] Wrote {len(written)} file(s) to [cyan]{output_dir}[/cyan]"
        )
        return self._report(outcomes, args)

    def _report(self, outcomes: list[FileOutcome], args: Any) -> int:
        """Print a summary of all outcomes and return the exit code."""
        table = Table(
            title="📊 Generation Summary",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Resource File", style="bold")
        table.add_column("Identity", style="cyan")
        table.add_column("Status")

        if args.verbose:
            table.add_column("Accessors", justify="right")
            table.add_column("Skipped", justify="right")

        for outcome in outcomes:
            status = (
                "[green]✓ generated[/green]"
                if outcome.success
                else f"[red]✗ {outcome.result.error_message}[/red]"
            )
            row = [str(outcome.path), outcome.identity or "-", status]
            if args.verbose:
                metadata = outcome.result.metadata
                row += [
                    str(metadata.get("entry_count", "-")),
                    str(metadata.get("skipped_count", "-")),
                ]
            table.add_row(*row)

        self.console.print()
        self.console.print(table)

        warnings = [
            (outcome.path, warning)
            for outcome in outcomes
            for warning in outcome.result.warnings
        ]
        if warnings:
            self.console.print("\n[yellow]⚠️  Warnings:[/yellow]")
            for path, warning in warnings:
                self.console.print(f"  [yellow]•[/yellow] {path.name}: {warning}")

        failed = [outcome for outcome in outcomes if not outcome.success]
        if failed:
            self.console.print(
                f"\n[red]✗ {len(failed)} of {len(outcomes)} file(s) failed[/red]"
            )
            return 1
        return 0

    def _handle_list_languages(self) -> int:
        """List supported languages."""
        language_info = list_all_language_info()

        table = Table(
            title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
        )
        table.add_column("Language", style="bold green", no_wrap=True)
        table.add_column("Extension", style="cyan")
        table.add_column("Generator Class", style="dim")
        table.add_column("Aliases", style="blue")

        for lang_name, info in sorted(language_info.items()):
            aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
            table.add_row(lang_name, info["file_extension"], info["class"], aliases)

        self.console.print()
        self.console.print(table)
        self.console.print()
        return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``resx-generator`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    logger.debug("Arguments: %s", args)

    return CLIHandler().run(args)


if __name__ == "__main__":
    raise SystemExit(main())
