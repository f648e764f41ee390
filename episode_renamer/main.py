"""
Point d'entrée CLI de Episode Renamer.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import info, rename
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="episode-renamer",
    help="Renomme et range films et épisodes d'après leurs tags MP4",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Affiche les logs de debug"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Episode Renamer - Classement des films et séries par métadonnées."""
    settings = Settings()

    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG"
    else:
        log_level = settings.log_level

    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Démarrage de Episode Renamer", version=__version__)


app.command()(rename)
app.command()(info)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Episode Renamer v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
