"""
Entite fichier source.

Vue d'un fichier candidat tel que produit par le parcours du repertoire
source : chemin complet, taille, nom, extension et repertoire parent.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """
    Fichier candidat trouve dans l'arborescence source.

    Attributs :
        path : Chemin complet du fichier
        size_bytes : Taille du fichier en octets au moment du parcours
    """

    path: Path
    size_bytes: int = 0

    @property
    def name(self) -> str:
        """Nom du fichier (sans le chemin)."""
        return self.path.name

    @property
    def extension(self) -> str:
        """Extension avec le point, casse d'origine conservee."""
        return self.path.suffix

    @property
    def directory(self) -> Path:
        """Repertoire parent du fichier."""
        return self.path.parent

    @property
    def is_empty(self) -> bool:
        return self.size_bytes == 0
