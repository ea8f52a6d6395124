"""Command-line interface for Video Review Analyzer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..ai.annotations import (
    build_metadata, bundle_from_response, duration_seconds,
    estimate_api_cost, is_annotation_response,
)
from ..ai.client import AIClient
from ..ai.critic import ReviewCritic
from ..config import Config
from ..core.models import AnalysisReport, AnnotationBundle, Category, ReportMetadata
from ..core.parser import check_conformance
from ..core.pipeline import AnalysisPipeline
from ..exceptions import ReviewAnalyzerError
from ..utils.file_handler import FileHandler
from ..utils.logger import setup_logging

app = typer.Typer(
    name="review-analyzer",
    help="Score video reviews from vision annotations or AI critiques"
)
console = Console()


@app.callback()
def configure(
    log_level: str = typer.Option(None, "--log-level", help="debug, info, warning, error"),
):
    """Set up logging before any command runs."""
    setup_logging(log_level or Config.LOG_LEVEL, console=Console(stderr=True))


def _require_file(path: Path) -> None:
    if not path.exists():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)


def _score_style(score: float, maximum: int) -> str:
    ratio = score / maximum if maximum else 0
    if ratio >= 0.8:
        return "green"
    if ratio >= 0.5:
        return "yellow"
    return "red"


def render_report(report: AnalysisReport) -> None:
    """Print a report as a rich table followed by its suggestions."""
    maximum = report.scorer.max_score
    table = Table(title=f"Review Analysis ({report.scorer.value}, 0-{maximum})")
    table.add_column("Category", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Notes")
    table.add_column("Improvements")

    for row in report.category_rows():
        style = _score_style(row["score"], maximum)
        score = f"[{style}]{row['score']}/{maximum}[/{style}]"
        if not row["scored"]:
            score += " [dim](missing)[/dim]"
        table.add_row(
            row["category"],
            score,
            "\n".join(row["notes"]) or "-",
            "\n".join(row["improvements"]) or "-",
        )

    console.print(table)

    overall_style = _score_style(report.overall_score, maximum)
    lines = [f"Overall score: [{overall_style}]{report.overall_score:.1f}[/{overall_style}] / {maximum}"]
    if report.metadata.file_size or report.metadata.duration:
        lines.append(f"File size: {report.metadata.file_size or 'N/A'}  "
                     f"Duration: {report.metadata.duration or 'N/A'}")
    if report.suggestions:
        lines.append("")
        lines.append("[bold]Suggestions:[/bold]")
        lines.extend(f"{i}. {s}" for i, s in enumerate(report.suggestions, 1))
    console.print(Panel("\n".join(lines), title="Summary"))


def _emit(report: AnalysisReport, output: Optional[Path]) -> None:
    if output is None:
        render_report(report)
        return
    FileHandler.save_report(output, report.to_dict())
    console.print(Panel(
        f"[green]Report written![/green]\n\n"
        f"Output: {output}\n"
        f"Overall score: {report.overall_score:.1f} / {report.scorer.max_score}",
        title="Analysis Complete"
    ))


@app.command()
def parse_critique(
    critique_file: Path = typer.Argument(..., help="Path to critique text from the AI service"),
    output: Path = typer.Option(None, help="Write the report to .json or .yaml instead of printing"),
    file_size: str = typer.Option("", help="File size to record in the report metadata"),
    duration: str = typer.Option("", help="Duration to record in the report metadata"),
):
    """Score a six-section AI critique (0-10 scale)."""

    _require_file(critique_file)
    text = FileHandler.load_text(critique_file)

    missing = check_conformance(text)
    if len(missing) == len(Category):
        console.print("[yellow]Warning: no category headers found; "
                      "the critique format may have changed.[/yellow]")

    report = AnalysisPipeline().analyze_narrative(
        text, ReportMetadata(file_size=file_size, duration=duration)
    )
    _emit(report, output)


@app.command()
def score_annotations(
    annotations_file: Path = typer.Argument(..., help="Annotation response or bundle (.json/.yaml)"),
    output: Path = typer.Option(None, help="Write the report to .json or .yaml instead of printing"),
    video_bytes: int = typer.Option(None, help="Size of the source video in bytes"),
    show_cost: bool = typer.Option(False, help="Show the estimated annotation API cost"),
):
    """Score vision-service annotations (0-5 scale)."""

    _require_file(annotations_file)
    try:
        payload = FileHandler.load_structured(annotations_file)
    except ReviewAnalyzerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if is_annotation_response(payload):
        bundle = bundle_from_response(payload)
    else:
        bundle = AnnotationBundle.from_dict(payload)

    report = AnalysisPipeline().analyze_annotations(
        bundle, build_metadata(bundle.shots, video_bytes)
    )
    _emit(report, output)

    if show_cost:
        cost = estimate_api_cost(duration_seconds(bundle.shots))
        table = Table(title=f"Estimated API cost ({cost['minutes']} min)")
        table.add_column("Feature")
        table.add_column("Rate/min", justify="right")
        table.add_column("Cost", justify="right")
        for feature, info in cost["features"].items():
            table.add_row(feature, f"${info['rate']}", f"${info['cost']:.2f}")
        table.add_row("[bold]Total[/bold]", "", f"[bold]${cost['total']:.2f}[/bold]")
        console.print(table)
        console.print("[dim]First 1000 minutes per feature per month are free.[/dim]")


@app.command()
def critique(
    material_file: Path = typer.Argument(..., help="Transcript or description of the review"),
    output: Path = typer.Option(None, help="Write the report to .json or .yaml instead of printing"),
    save_critique: Path = typer.Option(None, help="Also save the raw critique text"),
):
    """Ask the AI service for a critique, then score it."""

    _require_file(material_file)
    material = FileHandler.load_text(material_file)

    try:
        critic = ReviewCritic(AIClient())
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Requesting critique...", total=None)
            report = AnalysisPipeline().analyze_with_critic(critic, material)
            progress.update(task, completed=True)
    except ReviewAnalyzerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if save_critique:
        FileHandler.save_text(save_critique, report.raw_data["narrativeResponse"])
    _emit(report, output)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
