"""
Interfaces ports pour le système de fichiers.

Interface abstraite (port) définissant le contrat pour le parcours de
l'arborescence source et les opérations de réconciliation (création de
répertoires, déplacement, copie, suppression).

Contrairement aux opérations de lecture, les mutations ne masquent pas
les erreurs : toute OSError est propagée à l'appelant.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from episode_renamer.core.entities import SourceFile


class IFileSystem(ABC):
    """
    Interface pour les opérations sur les fichiers.

    Définit les opérations pour parcourir la source, interroger
    l'existence et la taille d'un fichier, et appliquer les actions
    de réconciliation.
    """

    @abstractmethod
    def iter_files(self, root: Path, recursive: bool = False) -> Iterator[SourceFile]:
        """
        Parcourt paresseusement les fichiers d'un répertoire.

        Les entrées cachées ou inaccessibles sont ignorées sans
        interrompre le parcours.

        Args :
            root : Répertoire source
            recursive : Descend dans les sous-répertoires

        Retourne :
            Itérateur de SourceFile dans l'ordre d'énumération
        """
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un fichier existe."""
        ...

    @abstractmethod
    def get_size(self, path: Path) -> int:
        """
        Récupère la taille du fichier en octets.

        Retourne :
            Taille du fichier en octets, ou 0 si le fichier n'existe pas
        """
        ...

    @abstractmethod
    def make_dirs(self, directory: Path) -> None:
        """Crée un répertoire et ses parents (sans erreur s'il existe déjà)."""
        ...

    @abstractmethod
    def move(self, source: Path, destination: Path) -> None:
        """
        Déplace (renomme) un fichier, en écrasant la destination.

        Raises :
            OSError : Si le déplacement échoue
        """
        ...

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> None:
        """
        Copie un fichier en écrasant la destination.

        Raises :
            OSError : Si la copie échoue
        """
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        """
        Supprime un fichier.

        Raises :
            OSError : Si la suppression échoue
        """
        ...
