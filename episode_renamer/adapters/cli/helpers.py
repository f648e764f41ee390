"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
- suppress_loguru : context manager pour desactiver les logs pendant l'affichage Rich
- expand_cli_path : expansion des variables d'environnement et de ~ dans un argument
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console

from episode_renamer.config import expand_path
from episode_renamer.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("episode_renamer")
    try:
        yield
    finally:
        loguru_logger.enable("episode_renamer")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container
        def my_command(container, ...):
            config = container.config()
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)

    return wrapper


def expand_cli_path(value: Optional[Path]) -> Optional[Path]:
    """Etend $VARIABLES et ~ dans un chemin passe en argument."""
    if value is None:
        return None
    return expand_path(value)
