"""
Service de reconciliation des fichiers avec leur destination.

Ce module decide, pour chaque fichier, de l'action a appliquer :
- Ignorer (non classe, ou destination de meme taille deja presente)
- Deplacer ou copier vers la destination
- Remplacer une destination existante de taille differente

En mode simulation (dry-run), aucune modification n'est faite sur le
systeme de fichiers : seule l'action prevue est retournee.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from loguru import logger as default_logger

from episode_renamer.core.entities import SourceFile
from episode_renamer.core.ports.file_system import IFileSystem
from episode_renamer.core.value_objects import DestinationPath, PlacementOptions

if TYPE_CHECKING:
    from loguru import Logger


class ReconcileAction(Enum):
    """
    Action appliquee (ou prevue en simulation) a un fichier.

    Les variantes WOULD_* sont les equivalents simules des actions reelles.
    FAILED signale une erreur du systeme de fichiers pendant l'operation.
    """

    SKIPPED = "skipped"
    MOVED = "moved"
    COPIED = "copied"
    REPLACED_BY_MOVE = "replaced_by_move"
    REPLACED_BY_COPY = "replaced_by_copy"
    WOULD_MOVE = "would_move"
    WOULD_COPY = "would_copy"
    WOULD_REPLACE_BY_MOVE = "would_replace_by_move"
    WOULD_REPLACE_BY_COPY = "would_replace_by_copy"
    FAILED = "failed"


class SkipReason(Enum):
    """Raison pour laquelle un fichier a ete ignore."""

    EMPTY = "empty"
    UNSUPPORTED = "unsupported"
    CORRUPT = "corrupt"
    NO_METADATA = "no metadata"
    UNCLASSIFIED = "unclassified"
    SAME_LENGTH = "same length"


@dataclass(frozen=True)
class ReconcileResult:
    """
    Resultat de la reconciliation d'un fichier.

    Attributs:
        action: Action appliquee ou prevue
        source: Chemin du fichier source
        destination: Chemin de destination (None si non classe)
        reason: Raison de l'abandon (si action SKIPPED)
        error: Message d'erreur (si action FAILED)
    """

    action: ReconcileAction
    source: Path
    destination: Optional[Path] = None
    reason: Optional[SkipReason] = None
    error: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.action is ReconcileAction.SKIPPED

    @property
    def failed(self) -> bool:
        return self.action is ReconcileAction.FAILED


class Reconciler:
    """
    Service de reconciliation source -> destination.

    Utilisation:
        reconciler = Reconciler(file_system)
        result = reconciler.reconcile(source, destination, options)
        if result.skipped:
            print(f"Ignore: {result.reason.value}")

    Les erreurs du systeme de fichiers (OSError) ne sont pas masquees :
    elles remontent a l'appelant.
    """

    def __init__(
        self,
        file_system: IFileSystem,
        logger: "Logger" = default_logger,
    ) -> None:
        """
        Initialise le service de reconciliation.

        Args:
            file_system: Adaptateur systeme de fichiers
            logger: Journal injecte (loguru par defaut)
        """
        self._fs = file_system
        self._logger = logger

    def reconcile(
        self,
        source: SourceFile,
        destination: Optional[DestinationPath],
        options: PlacementOptions,
    ) -> ReconcileResult:
        """
        Applique (ou simule) l'action adaptee a un fichier.

        Etapes:
        1. Pas de destination -> ignore (non classe)
        2. Destination existante de meme taille -> ignore
        3. Creation du repertoire parent (hors simulation)
        4. Deplacement direct, ou copie + suppression en cas de conflit
        5. Copie avec ecrasement en mode copie

        Args:
            source: Fichier source
            destination: Destination calculee (None si non classe)
            options: Options de placement (move, dry_run, in_place)

        Returns:
            ReconcileResult decrivant l'action.

        Raises:
            OSError: Si une operation sur le systeme de fichiers echoue.
        """
        if destination is None:
            return ReconcileResult(
                action=ReconcileAction.SKIPPED,
                source=source.path,
                reason=SkipReason.UNCLASSIFIED,
            )

        target = destination.path
        target_exists = self._fs.exists(target)

        # Heuristique de doublon : meme taille, sans comparaison de contenu
        if target_exists and self._fs.get_size(target) == source.size_bytes:
            self._logger.debug(
                "{source} a la meme taille que {destination}",
                source=str(source.path),
                destination=str(target),
            )
            return ReconcileResult(
                action=ReconcileAction.SKIPPED,
                source=source.path,
                destination=target,
                reason=SkipReason.SAME_LENGTH,
            )

        if not options.dry_run:
            self._fs.make_dirs(destination.directory)

        if options.move:
            action = self._move(source.path, target, target_exists, options)
        else:
            action = self._copy(source.path, target, target_exists, options)

        return ReconcileResult(action=action, source=source.path, destination=target)

    def _move(
        self,
        source: Path,
        target: Path,
        target_exists: bool,
        options: PlacementOptions,
    ) -> ReconcileAction:
        """
        Deplace le fichier vers la destination.

        Si la destination existe (hors mode sur place), la source est
        copiee par-dessus puis supprimee, pour ne pas perdre la
        destination avant que le contenu ne soit ecrit.
        """
        self._logger.info(
            "Deplacement de {source} vers {destination}",
            source=str(source),
            destination=str(target),
        )

        if not target_exists or options.in_place:
            if options.dry_run:
                return ReconcileAction.WOULD_MOVE
            self._fs.move(source, target)
            return ReconcileAction.MOVED

        if options.dry_run:
            return ReconcileAction.WOULD_REPLACE_BY_MOVE

        self._fs.copy(source, target)
        if self._fs.exists(source):
            self._fs.delete(source)
        return ReconcileAction.REPLACED_BY_MOVE

    def _copy(
        self,
        source: Path,
        target: Path,
        target_exists: bool,
        options: PlacementOptions,
    ) -> ReconcileAction:
        """Copie le fichier vers la destination en ecrasant l'existant."""
        self._logger.info(
            "Copie de {source} vers {destination}",
            source=str(source),
            destination=str(target),
        )

        if options.dry_run:
            if target_exists:
                return ReconcileAction.WOULD_REPLACE_BY_COPY
            return ReconcileAction.WOULD_COPY

        self._fs.copy(source, target)
        if target_exists:
            return ReconcileAction.REPLACED_BY_COPY
        return ReconcileAction.COPIED
