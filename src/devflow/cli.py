"""CLI for DevFlow."""

from __future__ import annotations

from pathlib import Path

import orjson
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from devflow.config import load_app_config
from devflow.constants import DEVFLOW_DIR, PACKAGE_VERSION, PRESET_FILE
from devflow.errors import IntentRequiredError
from devflow.logging_config import configure_logging
from devflow.presets import MatchResult, build_preset_record, get_scenarios, match_preset
from devflow.review import gather_review_data, render_review_markdown, write_review_report
from devflow.schemas.enums import BuildTaskStatus, BuildVerdict, CopyStatus
from devflow.schemas.toolchain_models import BuildCheckReport
from devflow.templates import (
    TEMPLATE_ROOT,
    CopyOutcome,
    TemplateFilter,
    list_template_files,
    synchronize_template,
)
from devflow.toolchain import BuildCheckRunner
from devflow.workflow import CleanupResult, cleanup_workspace, write_preset_record
from devflow.workflow.storage import write_json

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="DevFlow seven-step development workflow tooling.",
)
console = Console()

INIT_ALIASES = ("create", "setup", "install")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"v{PACKAGE_VERSION}")
        raise typer.Exit()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    show_version: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the DevFlow version and exit.",
    ),
) -> None:
    """DevFlow seven-step development workflow tooling."""
    del show_version
    configure_logging(verbose=verbose)


@app.command()
def version() -> None:
    """Print the DevFlow version."""
    typer.echo(PACKAGE_VERSION)


@app.command("init")
def init(
    target: Path = typer.Argument(Path("."), help="Directory to scaffold."),
    force: bool = typer.Option(False, "-f", "--force", help="Overwrite existing files without asking."),
    yes: bool = typer.Option(False, "-y", "--yes", help="Answer yes to prompts."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only preview the files to write."),
    list_files: bool = typer.Option(False, "--list", help="List every template file."),
    config: Path | None = typer.Option(None, "--config", help="Path to a settings YAML override."),
) -> None:
    """Copy the DevFlow workspace template into TARGET."""
    try:
        target_dir = target.expanduser().resolve()
        settings = load_app_config(config, workspace_root=target_dir)
        path_filter = TemplateFilter.from_globs(settings.template.exclude_globs)

        if list_files or dry_run:
            files = list_template_files(TEMPLATE_ROOT, path_filter=path_filter)
            console.print(f"Template files ({len(files)}):")
            for rel in files:
                console.print(f"  {escape(rel)}", highlight=False)
            if dry_run:
                console.print("Dry run complete. No files were written.")
            return

        if (target_dir / DEVFLOW_DIR).exists() and not force and not yes:
            if not typer.confirm(
                f"{DEVFLOW_DIR} already exists in {target_dir}. Continue?", default=False
            ):
                console.print("[yellow]Cancelled.[/yellow]")
                return

        outcomes = synchronize_template(
            TEMPLATE_ROOT,
            target_dir,
            force=force,
            path_filter=path_filter,
        )
        _render_copy_outcomes(outcomes)
        _render_next_steps()
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Init failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


for _alias in INIT_ALIASES:
    app.command(_alias, hidden=True)(init)


@app.command("wizard")
def wizard(
    intent: list[str] | None = typer.Argument(None, help="Natural-language description of the task."),
    output: Path | None = typer.Option(
        None, "-o", "--output", help=f"Preset file to write (default {PRESET_FILE})."
    ),
    cwd: Path | None = typer.Option(None, "--cwd", help="Workspace root."),
    show_ranking: bool = typer.Option(False, "--show-ranking", help="Print every scenario score."),
) -> None:
    """Match a scenario for INTENT and record it in the workspace."""
    try:
        root_dir = (cwd or Path.cwd()).resolve()
        text = " ".join(intent or []).strip()
        if not text:
            text = typer.prompt("Describe your goal or requirement", default="", show_default=False).strip()
        if not text:
            raise IntentRequiredError("No description provided; wizard aborted.")

        result = match_preset(text)
        _render_match(result, show_ranking=show_ranking)

        record = build_preset_record(text, result)
        target = output if output is not None else root_dir / PRESET_FILE
        written = write_preset_record(target.resolve(), record)
        console.print(f"Scenario written to: [bold]{escape(str(written))}[/bold]")
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Wizard failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command("review")
def review(
    output: Path | None = typer.Option(None, "-o", "--output", help="Report file to write."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Workspace root."),
    commit_limit: int | None = typer.Option(
        None, "--commit-limit", min=0, help="Number of recent commits to include."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    config: Path | None = typer.Option(None, "--config", help="Path to a settings YAML override."),
) -> None:
    """Summarize workflow progress, test commands, recent commits and next steps."""
    try:
        root_dir = (cwd or Path.cwd()).resolve()
        settings = load_app_config(
            config,
            workspace_root=root_dir,
            cli_overrides={"commit_limit": commit_limit},
        )
        report = gather_review_data(
            root_dir,
            commit_limit=settings.review.commit_limit,
            build_ok_status=settings.review.build_ok_status,
            approved_statuses=tuple(settings.review.approved_statuses),
        )
        markdown = render_review_markdown(report, root_dir)
        report_path = write_review_report(
            markdown,
            workspace_root=root_dir,
            output=output,
            report_dir=settings.review.report_dir,
        )
        if as_json:
            typer.echo(
                orjson.dumps(report.model_dump(mode="json"), option=orjson.OPT_INDENT_2).decode(
                    "utf-8"
                )
            )
        else:
            typer.echo(markdown)
            console.print(f"Report written to: [bold]{escape(str(report_path))}[/bold]")
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Review failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command("cleanup")
def cleanup(
    purge: bool = typer.Option(False, "--purge", help="Delete step files instead of archiving them."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only print the planned actions."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Workspace root."),
) -> None:
    """Archive step artifacts and reset state.json and preset.json."""
    try:
        root_dir = (cwd or Path.cwd()).resolve()
        result = cleanup_workspace(root_dir, purge=purge, dry_run=dry_run)
        _render_cleanup(result, root_dir)
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Cleanup failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command("build-check")
def build_check(
    cwd: Path | None = typer.Option(None, "--cwd", help="Project root."),
    output: Path | None = typer.Option(None, "-o", "--output", help="Write the JSON report here."),
    config: Path | None = typer.Option(None, "--config", help="Path to a settings YAML override."),
) -> None:
    """Run build, lint and typecheck commands for the detected toolchains."""
    try:
        root_dir = (cwd or Path.cwd()).resolve()
        settings = load_app_config(config, workspace_root=root_dir)
        report = BuildCheckRunner(timeout_seconds=settings.build_check.timeout_seconds).run(root_dir)
        if output is not None:
            write_json(output.resolve(), report.model_dump(mode="json", by_alias=True))
        _render_build_report(report)
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Build check failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if report.status == BuildVerdict.FAILED:
        raise typer.Exit(code=1)


@app.command("presets")
def presets() -> None:
    """List the workflow scenarios and their trigger keywords."""
    table = Table(title="Workflow Scenarios")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Keywords")
    for scenario in get_scenarios():
        table.add_row(scenario.id, scenario.title, ", ".join(scenario.keywords) or "-")
    console.print(table)


def _render_copy_outcomes(outcomes: list[CopyOutcome]) -> None:
    if not outcomes:
        console.print("[yellow]No files were written.[/yellow]")
        return

    table = Table(title="Template Sync")
    table.add_column("Status")
    table.add_column("Path")
    table.add_column("Reason")
    for outcome in outcomes:
        table.add_row(outcome.status.value, outcome.path, outcome.reason or "")
    console.print(table)

    counts = {status: 0 for status in CopyStatus}
    for outcome in outcomes:
        counts[outcome.status] += 1
    console.print(f"Copied files: {counts[CopyStatus.COPIED]}")
    if counts[CopyStatus.OVERWRITTEN]:
        console.print(f"[yellow]Overwritten files: {counts[CopyStatus.OVERWRITTEN]}[/yellow]")
    if counts[CopyStatus.SKIPPED]:
        console.print(f"[yellow]Skipped files: {counts[CopyStatus.SKIPPED]}[/yellow]")


def _render_next_steps() -> None:
    console.print(
        Panel.fit(
            '1. devflow wizard "describe your task"   # match a scenario\n'
            "2. Share .devflow/bootstrap/session-start.md with your assistant\n"
            "3. Work through the steps; use devflow review / devflow cleanup as needed",
            title="DevFlow workspace ready",
        )
    )


def _render_match(result: MatchResult, *, show_ranking: bool) -> None:
    scenario = result.scenario
    lines = [f"Scenario: [bold]{escape(scenario.title)}[/bold] ({scenario.id})"]
    if result.matched_keywords:
        lines.append(f"Matched keywords: {escape(', '.join(result.matched_keywords))}")
    lines.append("")
    lines.append(escape(scenario.summary))
    lines.append("")
    lines.append("Recommended actions:")
    lines.extend(
        f"  {index}. {escape(item)}" for index, item in enumerate(scenario.recommendations, start=1)
    )
    console.print(Panel("\n".join(lines), title="Scenario Match"))
    console.print("Add this guidance to the first requirements message:")
    console.print(escape(scenario.guidance_prompt))

    if show_ranking:
        table = Table(title="Scenario Ranking")
        table.add_column("Scenario")
        table.add_column("Score", justify="right")
        table.add_column("Matched")
        for item in result.ranking:
            table.add_row(item.scenario.id, str(item.score), ", ".join(item.matched_keywords) or "-")
        console.print(table)


def _render_cleanup(result: CleanupResult, root_dir: Path) -> None:
    prefix = "DRY RUN: " if result.dry_run else ""
    if result.purge:
        if not result.deleted:
            console.print("No step files to delete.")
        for path in result.deleted:
            console.print(f"{prefix}delete {path.relative_to(root_dir).as_posix()}", highlight=False)
    else:
        if not result.archived:
            console.print("No step files to archive.")
        for move in result.archived:
            console.print(
                f"{prefix}archive {move.source.relative_to(root_dir).as_posix()} -> "
                f"{move.target.relative_to(root_dir).as_posix()}",
                highlight=False,
            )
    for path in result.reset_files:
        console.print(f"{prefix}reset {path.relative_to(root_dir).as_posix()}", highlight=False)
    for path in result.queue_removed:
        console.print(f"{prefix}remove {path.relative_to(root_dir).as_posix()}", highlight=False)

    if result.dry_run:
        console.print("DRY RUN: cleanup simulated; nothing was changed.")
    else:
        console.print("[green]Cleanup complete.[/green] A new DevFlow session can start.")


def _render_build_report(report: BuildCheckReport) -> None:
    table = Table(title="Build Check")
    table.add_column("Task")
    table.add_column("Status")
    table.add_column("Exit", justify="right")
    for task in report.tasks:
        color = {
            BuildTaskStatus.OK: "green",
            BuildTaskStatus.FAILED: "red",
            BuildTaskStatus.SKIPPED: "yellow",
        }[task.status]
        table.add_row(
            task.label,
            f"[{color}]{task.status.value}[/{color}]",
            "-" if task.exit_code is None else str(task.exit_code),
        )
    if not report.tasks:
        console.print("No toolchain markers detected; nothing to check.")
    else:
        console.print(table)
    color = "green" if report.status == BuildVerdict.OK else "red"
    console.print(f"Overall: [{color}]{report.status.value}[/{color}]")
