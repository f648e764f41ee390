"""
Interface port pour la lecture des tags embarques.

Definit le contrat de l'extracteur de metadonnees et la taxonomie
d'erreurs des conteneurs illisibles.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from episode_renamer.core.value_objects.metadata import MetadataRecord


class TagReaderError(Exception):
    """Erreur de base de la lecture des tags d'un fichier."""

    def __init__(self, path: Path, message: str = "") -> None:
        self.path = path
        super().__init__(message or str(path))


class UnsupportedFormatError(TagReaderError):
    """Le conteneur du fichier n'est pas reconnu."""


class CorruptFileError(TagReaderError):
    """Le conteneur est reconnu mais ne peut pas etre analyse."""


class ITagReader(ABC):
    """
    Interface pour l'extraction des metadonnees d'un fichier media.

    Le fichier doit etre ferme avant le retour de read(), quelle que
    soit l'issue, afin de ne pas bloquer un deplacement ou une
    suppression ulterieure.
    """

    @abstractmethod
    def read(self, path: Path) -> Optional[MetadataRecord]:
        """
        Extrait le MetadataRecord d'un fichier.

        Args:
            path: Chemin complet du fichier

        Returns:
            MetadataRecord, ou None si le fichier ne porte pas de tag Apple.

        Raises:
            UnsupportedFormatError: Conteneur non reconnu.
            CorruptFileError: Conteneur illisible.
        """
        ...
