"""
Service orchestrant le renommage d'une arborescence source.

Enchaine, fichier par fichier et dans l'ordre d'enumeration :
parcours -> lecture des tags -> classification -> calcul du chemin
-> reconciliation. Un fichier en echec n'interrompt jamais le
traitement des suivants.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger as default_logger

from episode_renamer.core.entities import SourceFile
from episode_renamer.core.ports.file_system import IFileSystem
from episode_renamer.core.ports.tag_reader import (
    CorruptFileError,
    ITagReader,
    UnsupportedFormatError,
)
from episode_renamer.core.value_objects import PlacementOptions
from episode_renamer.services.classifier import Classifier
from episode_renamer.services.reconciler import (
    ReconcileAction,
    ReconcileResult,
    Reconciler,
    SkipReason,
)

if TYPE_CHECKING:
    from loguru import Logger


@dataclass
class RunSummary:
    """
    Bilan d'une execution.

    Attributs:
        results: Resultat de chaque fichier traite, dans l'ordre de traitement
    """

    results: list[ReconcileResult] = field(default_factory=list)

    def add(self, result: ReconcileResult) -> None:
        self.results.append(result)

    def count(self, action: ReconcileAction) -> int:
        """Nombre de fichiers pour une action donnee."""
        return sum(1 for result in self.results if result.action is action)

    @property
    def action_counts(self) -> Counter:
        return Counter(result.action for result in self.results)

    @property
    def skip_reasons(self) -> Counter:
        return Counter(result.reason for result in self.results if result.skipped)

    @property
    def skipped(self) -> list[ReconcileResult]:
        return [result for result in self.results if result.skipped]

    @property
    def failures(self) -> list[ReconcileResult]:
        return [result for result in self.results if result.failed]

    @property
    def total(self) -> int:
        return len(self.results)


class RenameWorkflow:
    """
    Orchestre le traitement complet d'un repertoire source.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour le parcours
    - Le lecteur de tags (ITagReader) pour les metadonnees
    - Le Classifier pour le calcul des destinations
    - Le Reconciler pour l'application des actions
    """

    def __init__(
        self,
        file_system: IFileSystem,
        tag_reader: ITagReader,
        classifier: Classifier,
        reconciler: Reconciler,
        logger: "Logger" = default_logger,
    ) -> None:
        """
        Initialise le workflow.

        Args:
            file_system: Implementation de IFileSystem pour le parcours
            tag_reader: Implementation de ITagReader pour la lecture des tags
            classifier: Service de classification
            reconciler: Service de reconciliation
            logger: Journal injecte (loguru par defaut)
        """
        self._file_system = file_system
        self._tag_reader = tag_reader
        self._classifier = classifier
        self._reconciler = reconciler
        self._logger = logger

    def run(self, source_root: Path, options: PlacementOptions) -> RunSummary:
        """
        Traite tous les fichiers du repertoire source.

        Args:
            source_root: Repertoire source
            options: Options de placement

        Returns:
            RunSummary avec le resultat de chaque fichier.
        """
        summary = RunSummary()

        for source in self._file_system.iter_files(source_root, options.recursive):
            summary.add(self.process_file(source, options))

        self._logger.debug(
            "Traitement termine: {total} fichier(s), {failed} echec(s)",
            total=summary.total,
            failed=len(summary.failures),
        )
        return summary

    def process_file(
        self, source: SourceFile, options: PlacementOptions
    ) -> ReconcileResult:
        """
        Traite un fichier : lecture des tags, classification, reconciliation.

        Args:
            source: Fichier source
            options: Options de placement

        Returns:
            ReconcileResult du fichier (SKIPPED ou FAILED inclus).
        """
        # Les fichiers vides ne sont jamais lus
        if source.is_empty:
            return self._skip(source, SkipReason.EMPTY)

        try:
            record = self._tag_reader.read(source.path)
        except UnsupportedFormatError:
            self._logger.debug("Fichier non supporte - {file}", file=source.name)
            return self._skip(source, SkipReason.UNSUPPORTED)
        except CorruptFileError:
            self._logger.debug("Fichier corrompu - {file}", file=source.name)
            return self._skip(source, SkipReason.CORRUPT)

        if record is None:
            self._logger.debug("Aucun tag 'Apple' dans {file}", file=source.name)
            return self._skip(source, SkipReason.NO_METADATA)

        destination = self._classifier.build_destination(record, source, options)

        try:
            return self._reconciler.reconcile(source, destination, options)
        except OSError as e:
            self._logger.error(
                "Echec du traitement de {source}: {error}",
                source=str(source.path),
                error=str(e),
            )
            return ReconcileResult(
                action=ReconcileAction.FAILED,
                source=source.path,
                destination=destination.path if destination else None,
                error=str(e),
            )

    @staticmethod
    def _skip(source: SourceFile, reason: SkipReason) -> ReconcileResult:
        return ReconcileResult(
            action=ReconcileAction.SKIPPED,
            source=source.path,
            reason=reason,
        )
