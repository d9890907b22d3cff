"""Rich console rendering of analysis results."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from seo_analyzer.analysis.keywords import keyword_status
from seo_analyzer.analysis.models import AnalysisResult, RecommendationType
from seo_analyzer.analysis.readability import readability_level
from seo_analyzer.reporting.interpretation import (
    KEYWORD_STATUS_LABELS,
    count_by_type,
    filter_recommendations,
    score_band,
    sort_keyword_density,
    sort_recommendations,
    word_count_message,
)


TYPE_ICONS = {
    RecommendationType.ERROR: "[red]✗[/red]",
    RecommendationType.WARNING: "[yellow]![/yellow]",
    RecommendationType.SUCCESS: "[green]✓[/green]",
}
STATUS_STYLES = {
    "missing": "red",
    "low": "yellow",
    "high": "dark_orange",
    "good": "green",
}


def render_summary(result: AnalysisResult, console: Console) -> None:
    """Print the score panel with the basic measurements."""
    band = score_band(result.score)
    level = readability_level(result.readability_score)
    
    console.print(Panel(
        f"[bold]SEO-poäng:[/bold] [{band.style}]{result.score}/100 ({band.name})[/{band.style}]\n"
        f"[bold]Läsbarhet:[/bold] {round(result.readability_score)} ({level.label})\n"
        f"[bold]Ord:[/bold] {result.content_length} ({word_count_message(result.content_length)})\n"
        f"[bold]Titel:[/bold] {result.title_length} tecken\n"
        f"[bold]Metabeskrivning:[/bold] {result.meta_description_length} tecken",
        title="📊 SEO-analys",
        border_style=band.style.split()[-1],
    ))


def render_recommendations(
    result: AnalysisResult,
    console: Console,
    rec_type: RecommendationType | str | None = None,
) -> None:
    """Print recommendations, most severe first."""
    counts = count_by_type(result.recommendations)
    recommendations = filter_recommendations(
        sort_recommendations(result.recommendations), rec_type
    )
    
    table = Table(
        title=(
            f"Rekommendationer (problem {counts['error']}, "
            f"förbättringar {counts['warning']}, bra {counts['success']})"
        ),
        show_lines=True,
    )
    table.add_column("", width=2)
    table.add_column("Påverkan", style="dim")
    table.add_column("Rekommendation", style="bold")
    table.add_column("Detaljer")
    
    for rec in recommendations:
        table.add_row(TYPE_ICONS[rec.type], rec.impact.value, escape(rec.message), escape(rec.details or ""))
    
    console.print(table)


def render_keyword_density(result: AnalysisResult, console: Console) -> None:
    """Print the keyword density table, if there are keywords."""
    if not result.keyword_density:
        console.print(
            "[dim]Inga nyckelord att analysera. Lägg till målnyckelord för att se densitetsdata.[/dim]"
        )
        return
    
    table = Table(title="Nyckelordsdensitet")
    table.add_column("Nyckelord", style="cyan")
    table.add_column("Antal", justify="right")
    table.add_column("Densitet", justify="right")
    table.add_column("Status")
    
    for entry in sort_keyword_density(result.keyword_density):
        status = keyword_status(entry.density)
        style = STATUS_STYLES[status]
        table.add_row(
            escape(entry.keyword),
            str(entry.count),
            f"{entry.density:.1f}%",
            f"[{style}]{KEYWORD_STATUS_LABELS[status]}[/{style}]",
        )
    
    console.print(table)


def render_report(
    result: AnalysisResult,
    console: Console,
    rec_type: RecommendationType | str | None = None,
) -> None:
    """Print the full report: summary, recommendations and keyword density."""
    render_summary(result, console)
    render_recommendations(result, console, rec_type)
    render_keyword_density(result, console)
