"""
Objets valeur pour le placement des fichiers.

PlacementOptions regroupe les options d'une execution (racines de
destination, modes deplacement/copie, simulation, sur place).
DestinationPath represente un emplacement cible calcule mais non verifie.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Rendu de l'annee absente, identique a la convention numerique des tags (0)
DEFAULT_MISSING_YEAR_TEXT = "0"


@dataclass(frozen=True)
class PlacementOptions:
    """
    Options de placement pour une execution.

    Attributs:
        movies_root: Racine de destination des films
        tv_root: Racine de destination des series
        in_place: Renomme dans le repertoire du fichier source
        recursive: Parcourt les sous-repertoires de la source
        move: Deplace au lieu de copier
        dry_run: Simule sans modifier le systeme de fichiers
        missing_year_text: Texte rendu pour une annee absente
    """

    movies_root: Optional[Path] = None
    tv_root: Optional[Path] = None
    in_place: bool = False
    recursive: bool = False
    move: bool = False
    dry_run: bool = False
    missing_year_text: str = DEFAULT_MISSING_YEAR_TEXT

    @classmethod
    def resolve(
        cls,
        movies_root: Optional[Path] = None,
        tv_root: Optional[Path] = None,
        *,
        in_place: bool = False,
        recursive: bool = False,
        move: bool = False,
        dry_run: bool = False,
        missing_year_text: str = DEFAULT_MISSING_YEAR_TEXT,
    ) -> "PlacementOptions":
        """
        Construit les options en appliquant le repli entre racines.

        Si une seule racine est fournie, elle sert pour les films et
        les series.

        Raises:
            ValueError: Aucune racine fournie hors mode sur place.
        """
        movies_root = movies_root if movies_root is not None else tv_root
        tv_root = tv_root if tv_root is not None else movies_root

        if movies_root is None and not in_place:
            raise ValueError(
                "Une destination (--movies ou --tv) est requise hors mode sur place"
            )

        return cls(
            movies_root=movies_root,
            tv_root=tv_root,
            in_place=in_place,
            recursive=recursive,
            move=move,
            dry_run=dry_run,
            missing_year_text=missing_year_text,
        )


@dataclass(frozen=True)
class DestinationPath:
    """
    Emplacement de destination calcule.

    Attributs:
        directory: Repertoire cible
        file_name: Nom du fichier cible (extension d'origine conservee)
    """

    directory: Path
    file_name: str

    @property
    def path(self) -> Path:
        """Chemin complet du fichier cible."""
        return self.directory / self.file_name
