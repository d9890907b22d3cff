"""
CLI module for the SEO analyzer.

Usage:
    python -m seo_analyzer analyze page.yaml [--json] [--output report.json]
    python -m seo_analyzer score --content-file page.html --title "..." -k seo
    python -m seo_analyzer readability page.html
    python -m seo_analyzer validate page.yaml
"""

import json
import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml
from rich.console import Console
from rich.markup import escape

from seo_analyzer.analysis import AnalysisInput, AnalysisResult, SEOAnalyzer
from seo_analyzer.analysis.readability import calculate_readability_score, readability_level
from seo_analyzer.analysis.text import count_words, strip_html
from seo_analyzer.config.settings import get_settings
from seo_analyzer.parsers.yaml_parser import YAMLParser, parse_keywords
from seo_analyzer.reporting import render_report
from seo_analyzer.utils.file_handler import FileHandler
from seo_analyzer.utils.logger import set_package_level


console = Console()

REC_TYPES = ["error", "warning", "success"]


def _emit_result(
    result: AnalysisResult,
    title: str,
    as_json: bool,
    output: Path | None,
    save: bool,
    rec_type: str | None,
) -> None:
    """Print the result and write it wherever requested."""
    settings = get_settings()
    data = result.to_dict()
    
    if as_json:
        click.echo(json.dumps(data, indent=settings.report_indent, ensure_ascii=False))
    else:
        render_report(result, console, rec_type)
    
    if output is not None:
        FileHandler.write_json(output, data, indent=settings.report_indent)
        if not as_json:
            console.print(f"[green]✓[/green] Saved report to: {output}")
    
    if save:
        path = FileHandler.save_report(
            data, title, settings.reports_dir(), indent=settings.report_indent
        )
        if not as_json:
            console.print(f"[green]✓[/green] Saved report to: {path}")


def _is_file(source: str) -> bool:
    try:
        return Path(source).is_file()
    except (OSError, ValueError):
        return False


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
def cli(log_level: str | None):
    """SEO Analyzer - score content for search engines and readability."""
    set_package_level(log_level or get_settings().log_level)


@cli.command()
@click.argument("spec_file", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--output", type=click.Path(path_type=Path), default=None, help="Write JSON report to file")
@click.option("--save", is_flag=True, help="Save a timestamped report in the output directory")
@click.option("--only", "rec_type", type=click.Choice(REC_TYPES), default=None, help="Show one recommendation type")
def analyze(spec_file: Path, as_json: bool, output: Path | None, save: bool, rec_type: str | None):
    """Analyze the page described by a YAML specification."""
    try:
        params = YAMLParser.parse_file(spec_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    
    result = SEOAnalyzer().analyze_input(params)
    _emit_result(result, params.title, as_json, output, save, rec_type)


@cli.command()
@click.option("--content-file", type=click.Path(path_type=Path), default=None, help="HTML file with the body")
@click.option("--content", default="", help="Inline HTML body")
@click.option("--title", default="", help="Page title")
@click.option("--meta", "meta_description", default="", help="Meta description")
@click.option("-k", "--keyword", "keywords", multiple=True, help="Target keyword, primary first (repeatable)")
@click.option("--url", default=None, help="Page URL")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--output", type=click.Path(path_type=Path), default=None, help="Write JSON report to file")
@click.option("--save", is_flag=True, help="Save a timestamped report in the output directory")
@click.option("--only", "rec_type", type=click.Choice(REC_TYPES), default=None, help="Show one recommendation type")
def score(
    content_file: Path | None,
    content: str,
    title: str,
    meta_description: str,
    keywords: tuple[str, ...],
    url: str | None,
    as_json: bool,
    output: Path | None,
    save: bool,
    rec_type: str | None,
):
    """Analyze content given directly as options."""
    if content_file is not None and content:
        _fail("Use either --content or --content-file, not both")
    
    if content_file is not None:
        try:
            content = FileHandler.read_file(content_file)
        except FileNotFoundError as e:
            _fail(str(e))
    
    params = AnalysisInput(
        content=content,
        title=title,
        meta_description=meta_description,
        target_keywords=parse_keywords(list(keywords)),
        url=url,
    )
    result = SEOAnalyzer().analyze_input(params)
    _emit_result(result, title, as_json, output, save, rec_type)


@cli.command()
@click.argument("source")
def readability(source: str):
    """Show the readability score of a file or a piece of text."""
    text = FileHandler.read_file(Path(source)) if _is_file(source) else source
    plain = strip_html(text)
    
    value = calculate_readability_score(plain)
    level = readability_level(value)
    
    console.print(f"[bold]Läsbarhet:[/bold] {value:.1f} ({level.label})")
    console.print(f"[dim]{level.description}[/dim]")
    console.print(f"[bold]Ord:[/bold] {count_words(plain)}")


@cli.command()
@click.argument("spec_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(spec_file: Path):
    """Check a YAML specification without analyzing it."""
    try:
        data = FileHandler.read_yaml(spec_file)
    except yaml.YAMLError as e:
        _fail(f"Invalid YAML syntax: {e}")
    
    if not isinstance(data, dict):
        _fail("YAML file must contain a dictionary at root level")
    
    issues = YAMLParser.validate_yaml_structure(data)
    if issues:
        for issue in issues:
            console.print(f"[red]✗[/red] {escape(issue)}")
        sys.exit(1)
    
    console.print(f"[green]✓[/green] {spec_file} is a valid analysis specification")


if __name__ == "__main__":
    cli()
