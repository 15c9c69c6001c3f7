"""FuzzBridge CLI -- Rich-formatted fuzzy ranking and edit scripts from the terminal."""

import logging

import click

from ._config import get_settings
from .exceptions import FuzzBridgeError


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _fail(console, exc: Exception) -> None:
    from rich.markup import escape

    console.print(f"[red]Error: {escape(str(exc))}[/red]")
    raise SystemExit(1)


def _score_style(score: float) -> str:
    return "green" if score >= 90 else ("yellow" if score >= 70 else "red")


@click.group()
@click.version_option(package_name="fuzzbridge")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """FuzzBridge -- Fuzzy ranking and edit-script reconstruction."""
    _configure_logging(verbose)


@cli.command()
@click.argument("text")
@click.option("--no-processor", is_flag=True, help="Skip trimming and lowercasing.")
@click.option("--asciify", is_flag=True, help="Transliterate accented letters to ASCII.")
def normalize(text, no_processor, asciify):
    """Normalize TEXT the way candidates are normalized before scoring."""
    from .normalize import process_string

    click.echo(process_string(text, processor=not no_processor, asciify=asciify))


@cli.command()
@click.argument("s1")
@click.argument("s2")
@click.option("--metric", "-m", default=None, help="Distance metric (default: levenshtein).")
def distance(s1, s2, metric):
    """Show distance and similarity scores between S1 and S2."""
    from rich.console import Console
    from rich.table import Table

    from .provider import get_provider

    console = Console()
    metric = metric or get_settings().metric

    try:
        provider = get_provider(metric)
        rows = [
            ("Distance", provider.distance(s1, s2)),
            ("Similarity", provider.similarity(s1, s2)),
            ("Normalized distance", provider.normalized_distance(s1, s2)),
            ("Normalized similarity", provider.normalized_similarity(s1, s2)),
        ]
    except FuzzBridgeError as exc:
        _fail(console, exc)

    table = Table(title=f"Metric: {provider.metric}")
    table.add_column("Measure", style="cyan")
    table.add_column("Value", justify="right", style="bold")
    for label, value in rows:
        table.add_row(label, f"{value:.4f}" if isinstance(value, float) else str(value))

    console.print(table)


@cli.command()
@click.argument("s1")
@click.argument("s2")
@click.option("--scorer", "-s", default=None, help="Scorer name (default: WRatio).")
def score(s1, s2, scorer):
    """Score S1 against S2 with a fuzz scorer (0-100)."""
    from rich.console import Console

    from .fuzz import fuzz_score, scorer_name

    console = Console()
    scorer = scorer or get_settings().scorer

    try:
        value = fuzz_score(s1, s2, scorer)
        name = scorer_name(scorer)
    except FuzzBridgeError as exc:
        _fail(console, exc)

    style = _score_style(value)
    console.print(f"{name}: [{style}]{value:.2f}[/{style}]")


def _edit_table(title, columns, rows):
    from rich.markup import escape
    from rich.table import Table

    table = Table(title=title)
    for name in columns:
        table.add_column(name, style="cyan" if name == "Type" else None)
    for row in rows:
        table.add_row(*[escape("NA" if v is None else str(v)) for v in row])
    return table


@cli.command()
@click.argument("s1")
@click.argument("s2")
@click.option("--metric", "-m", default=None, help="Metric with edit operations (default: levenshtein).")
def editops(s1, s2, metric):
    """List the edit operations turning S1 into S2 (1-based positions)."""
    from rich.console import Console

    from .provider import get_editops

    console = Console()

    try:
        ops = get_editops(s1, s2, metric=metric or get_settings().metric)
    except FuzzBridgeError as exc:
        _fail(console, exc)

    console.print(_edit_table(
        f"{len(ops)} edit operations",
        ["Type", "Source pos", "Dest pos"],
        [(op.kind.value, op.source_position, op.dest_position) for op in ops],
    ))


@cli.command()
@click.argument("s1")
@click.argument("s2")
@click.option("--metric", "-m", default=None, help="Metric with opcodes (default: levenshtein).")
def opcodes(s1, s2, metric):
    """List the opcodes turning S1 into S2 (1-based, inclusive ranges)."""
    from rich.console import Console

    from .provider import get_opcodes

    console = Console()

    try:
        ops = get_opcodes(s1, s2, metric=metric or get_settings().metric)
    except FuzzBridgeError as exc:
        _fail(console, exc)

    console.print(_edit_table(
        f"{len(ops)} opcodes",
        ["Type", "Src begin", "Src end", "Dest begin", "Dest end"],
        [(op.kind.value, *op.source_range, *op.dest_range) for op in ops],
    ))


@cli.command()
@click.argument("s1")
@click.argument("s2")
@click.option("--mode", type=click.Choice(["editops", "opcodes"]), default="opcodes",
              help="Edit description to replay.")
@click.option("--metric", "-m", default=None, help="Metric that produces the description.")
@click.option("--cells", is_flag=True, help="Show the result as single-character cells.")
def apply(s1, s2, mode, metric, cells):
    """Rebuild S2 from S1 by replaying the provider's edit description."""
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel

    from .provider import get_editops, get_opcodes
    from .reconstruct import (
        apply_editops,
        apply_editops_cells,
        apply_opcodes,
        apply_opcodes_cells,
    )

    console = Console()
    metric = metric or get_settings().metric

    try:
        if mode == "editops":
            ops = get_editops(s1, s2, metric=metric)
            result = apply_editops(ops, s1, s2)
            result_cells = apply_editops_cells(ops, s1, s2) if cells else None
        else:
            ops = get_opcodes(s1, s2, metric=metric)
            result = apply_opcodes(ops, s1, s2)
            result_cells = apply_opcodes_cells(ops, s1, s2) if cells else None
    except FuzzBridgeError as exc:
        _fail(console, exc)

    matched = result == s2
    status = "[green]OK[/green]" if matched else "[red]MISMATCH[/red]"
    console.print(Panel(
        f"Source: {escape(s1)}\n"
        f"Result: [bold]{escape(result)}[/bold]\n"
        f"Rows replayed: {len(ops)}  |  Round trip: {status}",
        title=f"Apply {mode}",
    ))
    if result_cells is not None:
        console.print(" | ".join(escape(c) for c in result_cells))
    if not matched:
        raise SystemExit(1)


@cli.command()
@click.argument("query")
@click.argument("choices", nargs=-1)
@click.option("--file", "-f", "csv_file", type=click.Path(exists=True), default=None,
              help="Read candidates from a CSV file.")
@click.option("--column", "-c", default="", help="CSV column holding the candidates.")
@click.option("--cutoff", "-t", type=float, default=None, help="Minimum score (default: 50).")
@click.option("--limit", "-n", type=int, default=None, help="Maximum matches; 0 for all (default: 3).")
@click.option("--scorer", "-s", default=None, help="Scorer name (default: WRatio).")
@click.option("--best", "mode", flag_value="best", help="Only show the best match.")
@click.option("--all", "mode", flag_value="all", help="Show every match in input order.")
@click.option("--top", "mode", flag_value="top", default=True, help="Show the top matches (default).")
@click.option("--asciify", is_flag=True, help="Transliterate accented letters before scoring.")
@click.option("--no-processor", is_flag=True, help="Skip trimming and lowercasing.")
@click.option("--workers", "-w", type=int, default=1, help="Threads used for scoring.")
def extract(query, choices, csv_file, column, cutoff, limit, scorer, mode,
            asciify, no_processor, workers):
    """Rank CHOICES (or a CSV column) against QUERY."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    from ._io import load_candidates
    from .extract import extract_best_match, extract_matches, extract_similar_strings

    console = Console()
    settings = get_settings()
    cutoff = settings.score_cutoff if cutoff is None else cutoff
    limit = settings.limit if limit is None else limit
    scorer = scorer or settings.scorer

    candidates = list(choices)
    if csv_file:
        if not column:
            console.print("[red]Error: --column is required with --file[/red]")
            raise SystemExit(1)
        try:
            candidates.extend(load_candidates(csv_file, column))
        except ValueError as exc:
            _fail(console, exc)

    options = dict(score_cutoff=cutoff, processor=not no_processor, asciify=asciify, scorer=scorer)
    try:
        with console.status("Scoring..."):
            if mode == "best":
                best = extract_best_match(query, candidates, **options)
                matches = [best] if best is not None else []
            elif mode == "all":
                matches = extract_similar_strings(query, candidates, workers=workers, **options)
            else:
                matches = extract_matches(query, candidates, limit=limit, workers=workers, **options)
    except FuzzBridgeError as exc:
        _fail(console, exc)

    console.print(f"\n[bold]Found {len(matches)} matches[/bold] "
                  f"among {len(candidates)} candidates (cutoff: {cutoff:g})\n")

    if not matches:
        return

    table = Table(title="Matches")
    table.add_column("#", justify="right")
    table.add_column("Candidate", style="cyan")
    table.add_column("Score", justify="right", style="bold")

    for rank, m in enumerate(matches, start=1):
        style = _score_style(m.score)
        table.add_row(str(rank), escape(m.text), f"[{style}]{m.score:.1f}[/{style}]")

    console.print(table)


if __name__ == "__main__":
    cli()
