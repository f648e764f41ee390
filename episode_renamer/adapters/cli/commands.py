"""
Commandes CLI pour le renommage (rename, info).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from episode_renamer.adapters.cli.helpers import (
    console,
    expand_cli_path,
    suppress_loguru,
    with_container,
)
from episode_renamer.core.value_objects import PlacementOptions
from episode_renamer.services.reconciler import ReconcileAction
from episode_renamer.services.workflow import RunSummary

# Libelles affiches dans le bilan
ACTION_LABELS: dict[ReconcileAction, str] = {
    ReconcileAction.MOVED: "Deplaces",
    ReconcileAction.COPIED: "Copies",
    ReconcileAction.REPLACED_BY_MOVE: "Remplaces (deplacement)",
    ReconcileAction.REPLACED_BY_COPY: "Remplaces (copie)",
    ReconcileAction.WOULD_MOVE: "A deplacer",
    ReconcileAction.WOULD_COPY: "A copier",
    ReconcileAction.WOULD_REPLACE_BY_MOVE: "A remplacer (deplacement)",
    ReconcileAction.WOULD_REPLACE_BY_COPY: "A remplacer (copie)",
    ReconcileAction.SKIPPED: "Ignores",
    ReconcileAction.FAILED: "Echecs",
}


def rename(
    source: Annotated[
        Path,
        typer.Argument(help="Repertoire source a parcourir"),
    ],
    movies: Annotated[
        Optional[Path],
        typer.Option("--movies", help="Destination des films (defaut: --tv)"),
    ] = None,
    tv: Annotated[
        Optional[Path],
        typer.Option("--tv", help="Destination des series (defaut: --movies)"),
    ] = None,
    move: Annotated[
        bool,
        typer.Option("--move", "-m", help="Deplace les fichiers au lieu de les copier"),
    ] = False,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Parcourt les sous-repertoires de SOURCE"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Simule sans deplacer ni copier: affiche seulement les actions prevues",
        ),
    ] = False,
    inplace: Annotated[
        bool,
        typer.Option(
            "--inplace", "-i", help="Renomme les fichiers sur place plutot que vers la destination"
        ),
    ] = False,
) -> None:
    """Renomme et range les films et episodes d'apres leurs tags MP4."""
    _rename(source, movies, tv, move, recursive, dry_run, inplace)


@with_container
def _rename(
    container,
    source: Path,
    movies: Optional[Path],
    tv: Optional[Path],
    move: bool,
    recursive: bool,
    dry_run: bool,
    inplace: bool,
) -> None:
    """Implementation de la commande rename."""
    settings = container.config()

    source = expand_cli_path(source)
    if not source.is_dir():
        raise typer.BadParameter(f"{source} n'est pas un repertoire", param_hint="SOURCE")

    movies_root = expand_cli_path(movies) or settings.movies_dir
    tv_root = expand_cli_path(tv) or settings.tv_dir

    try:
        options = PlacementOptions.resolve(
            movies_root,
            tv_root,
            in_place=inplace,
            recursive=recursive,
            move=move,
            dry_run=dry_run,
            missing_year_text=settings.missing_year_text,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--movies/--tv") from e

    workflow = container.rename_workflow()
    summary = workflow.run(source, options)

    with suppress_loguru():
        console.print(_render_summary(summary, dry_run))

    if summary.failures:
        for failure in summary.failures:
            console.print(f"[red]Echec: {failure.source} ({failure.error})[/red]")
        raise typer.Exit(1)


def _render_summary(summary: RunSummary, dry_run: bool) -> Table:
    """Cree le tableau Rich du bilan d'execution."""
    title = "Bilan (simulation)" if dry_run else "Bilan"
    table = Table(title=title)
    table.add_column("Action")
    table.add_column("Fichiers", justify="right")

    counts = summary.action_counts
    for action, label in ACTION_LABELS.items():
        if counts[action]:
            table.add_row(label, str(counts[action]))

    for reason, count in summary.skip_reasons.items():
        table.add_row(f"  [dim]ignores: {reason.value}[/dim]", f"[dim]{count}[/dim]")

    table.add_row("[bold]Total[/bold]", f"[bold]{summary.total}[/bold]")
    return table


def info() -> None:
    """Affiche la configuration actuelle."""
    _info()


@with_container
def _info(container) -> None:
    config = container.config()
    console.print(f"Films : {config.movies_dir or '-'}")
    console.print(f"Series : {config.tv_dir or '-'}")
    console.print(f"Annee absente : {config.missing_year_text!r}")
    console.print(f"Niveau de log : {config.log_level}")
    console.print(f"Fichier de log : {config.log_file or '-'}")
