"""
Objets valeur pour les metadonnees embarquees des fichiers medias.

Vue normalisee et immutable des champs de tags (atomes iTunes/Apple)
utiles au classement d'un fichier : type de media, titre, annee,
serie, saison, episode, partie et oeuvre.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaKind(Enum):
    """Type de media deduit des tags.

    Valeurs:
        MOVIE: Film
        TV_SHOW: Episode de serie TV
        UNCLASSIFIED: Ni l'un ni l'autre, ou les deux a la fois
    """

    MOVIE = "movie"
    TV_SHOW = "tv_show"
    UNCLASSIFIED = "unclassified"


def kind_from_signals(is_movie: bool, is_tv_show: bool) -> MediaKind:
    """
    Reconstruit le type de media a partir des deux signaux independants.

    Les signaux contradictoires (les deux vrais ou les deux faux)
    donnent explicitement UNCLASSIFIED.

    Args:
        is_movie: Le tag indique un film.
        is_tv_show: Le tag indique un episode de serie.

    Returns:
        Le MediaKind correspondant.
    """
    if is_movie and not is_tv_show:
        return MediaKind.MOVIE
    if is_tv_show and not is_movie:
        return MediaKind.TV_SHOW
    return MediaKind.UNCLASSIFIED


@dataclass(frozen=True)
class MetadataRecord:
    """
    Metadonnees normalisees d'un fichier media.

    Cree une seule fois par fichier scanne, jamais modifie, puis
    abandonne une fois le chemin de destination calcule.

    Attributs:
        kind: Type de media (MOVIE, TV_SHOW, UNCLASSIFIED)
        title: Titre du film ou de l'episode (peut etre vide)
        year: Annee de sortie (films uniquement)
        show_name: Nom(s) de la serie, joints par "; "
        season_number: Numero de saison (0 si absent)
        episode_number: Numero d'episode (0 si absent)
        content_part: Numero de partie d'un episode en plusieurs parties
        work: Annotation libre (oeuvre) ajoutee en suffixe
    """

    kind: MediaKind = MediaKind.UNCLASSIFIED
    title: str = ""
    year: Optional[int] = None
    show_name: str = ""
    season_number: int = 0
    episode_number: int = 0
    content_part: Optional[int] = None
    work: Optional[str] = None

    @property
    def work_text(self) -> Optional[str]:
        """Retourne l'oeuvre sans espaces superflus, ou None si vide."""
        if self.work is None:
            return None
        stripped = self.work.strip()
        return stripped or None

    @property
    def is_part(self) -> bool:
        """Indique si le fichier n'est qu'une partie d'un episode."""
        return bool(self.content_part)
