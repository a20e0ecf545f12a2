# landingkit/cli/runner.py

"""Headless generation runner: prints content and saves it to disk."""

import json
import logging
import random
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from landingkit.models.content import GenerationOptions
from landingkit.services.pipeline import GenerationResult, LandingPagePipeline
from landingkit.storage.file_manager import FileManager

logger = logging.getLogger("landingkit.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(result: GenerationResult) -> None:
    """Render the generated content as a two-column Rich table."""
    content = result.content
    table = Table(
        title=f"Landing Page: {content.product.title}",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Section", style="magenta", width=14)
    table.add_column("Content", overflow="fold")

    table.add_row("Headline", content.hero.headline)
    table.add_row("Subheadline", content.hero.subheadline)
    table.add_row("CTA", content.hero.cta)
    table.add_row("Description", content.product.description)
    table.add_row(
        "Features", "\n".join(f"• {f}" for f in content.product.features)
    )
    pricing = content.pricing
    table.add_row(
        "Pricing",
        f"[green]{pricing.current}[/green] (was {pricing.original}, "
        f"save {pricing.discount}) {pricing.currency}\n{pricing.urgency}",
    )
    table.add_row(
        "Reviews",
        "\n".join(
            f"{'★' * r.rating} {r.name}: {r.comment}" for r in content.reviews
        )
        or "-",
    )
    table.add_row(
        "Upsells",
        "\n".join(f"{u.title} ({u.price})" for u in content.upsells) or "-",
    )
    proof = content.social_proof
    table.add_row(
        "Social proof",
        f"{proof.total_customers:,} customers, {proof.average_rating}★, "
        f"{proof.countries_served} countries",
    )
    table.add_row("Validation", f"{result.validation_score:.0%}")

    Console().print(table)


def _save(file_manager: FileManager, result: GenerationResult) -> None:
    try:
        path = file_manager.save_result(result.query, result.to_dict())
        _err.print(f"[dim]Saved → {path}[/dim]")
    except OSError as exc:
        logger.error("Save failed: %s", exc, exc_info=True)
        _err.print(f"[red]Save failed: {exc}[/red]")


async def cli_generate(
    target: str,
    options: GenerationOptions,
    output_format: str,
    output_dir: str | None,
    seed: int | None = None,
) -> int:
    """Run one generation and return an exit code (0=ok, 1=fail)."""
    if not target.strip():
        _err.print("[red]Nothing to generate: empty URL or query.[/red]")
        return 1

    file_manager = FileManager(Path(output_dir) if output_dir else None)
    rng = random.Random(seed) if seed is not None else None
    pipeline = LandingPagePipeline(rng=rng)

    _err.print(
        f"[bold]Generating:[/bold] {target}  "
        f"[dim]audience={options.target_audience} "
        f"language={options.language}[/dim]"
    )
    result = await pipeline.generate(target, options)

    for error_msg in result.errors:
        _err.print(f"[red]Error: {error_msg}[/red]")
    for warning in result.warnings:
        _err.print(f"[yellow]Warning: {warning}[/yellow]")

    match = result.match
    _err.print(
        f"[green]✓ {result.product.title}[/green] "
        f"[dim](source={result.product.source or 'unknown'}, "
        f"similarity={match.similarity:.2f}, "
        f"{'matched' if match.accepted else 'unmatched'}, "
        f"{result.generation_time_ms} ms)[/dim]"
    )

    _save(file_manager, result)

    if output_format == "table":
        _print_table(result)
    else:
        json.dump(result.to_dict(), sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")

    return 0
