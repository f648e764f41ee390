"""
Service de classification des fichiers medias.

Determine si un MetadataRecord decrit un film ou un episode de serie,
puis delegue le calcul du chemin au PathBuilder correspondant.
"""

from typing import TYPE_CHECKING, Optional

from loguru import logger as default_logger

from episode_renamer.core.entities import SourceFile
from episode_renamer.core.value_objects import (
    DestinationPath,
    MediaKind,
    MetadataRecord,
    PlacementOptions,
)
from episode_renamer.services.path_builder import PathBuilder

if TYPE_CHECKING:
    from loguru import Logger


def classify(record: MetadataRecord) -> MediaKind:
    """
    Retourne le type de media d'un enregistrement.

    Fonction pure : le type est fixe a la lecture des tags
    (voir kind_from_signals) et n'est jamais recalcule ici.
    """
    return record.kind


class Classifier:
    """
    Aiguille un MetadataRecord vers le calcul de chemin film ou serie.

    Les fichiers non classes sont journalises au niveau INFO et
    n'ont pas de destination.
    """

    def __init__(
        self,
        path_builder: PathBuilder,
        logger: "Logger" = default_logger,
    ) -> None:
        """
        Initialise le classifieur.

        Args:
            path_builder: Service de calcul des chemins
            logger: Journal injecte (loguru par defaut)
        """
        self._path_builder = path_builder
        self._logger = logger

    def build_destination(
        self,
        record: MetadataRecord,
        source: SourceFile,
        options: PlacementOptions,
    ) -> Optional[DestinationPath]:
        """
        Calcule la destination d'un fichier selon son type.

        Args:
            record: Metadonnees du fichier
            source: Fichier source
            options: Options de placement

        Returns:
            DestinationPath, ou None si le fichier n'est pas classe.
        """
        kind = classify(record)

        if kind is MediaKind.MOVIE:
            return self._path_builder.build_movie_destination(record, source, options)

        if kind is MediaKind.TV_SHOW:
            return self._path_builder.build_tv_destination(record, source, options)

        self._logger.info(
            "Impossible de classer {file} comme film ou serie",
            file=source.name,
        )
        return None
