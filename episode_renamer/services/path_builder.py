"""
Service de calcul des chemins de destination.

Ce module transforme un MetadataRecord et les options de placement
en emplacement de destination (repertoire + nom de fichier).

Structure films  : <movies_root>/Movies/[Titre (Annee)/]Titre (Annee)[ - Oeuvre].ext
Structure series : <tv_root>/TV Shows/Serie/Season XX/Serie - sXXeYY - Titre[ - Oeuvre].ext

En mode sur place, le repertoire est celui du fichier source et seul
le nom du fichier est reecrit.
"""

from pathlib import Path
from typing import Optional

from episode_renamer.core.entities import SourceFile
from episode_renamer.core.value_objects import (
    DestinationPath,
    MetadataRecord,
    PlacementOptions,
)
from episode_renamer.services.sanitizer import (
    sanitize_directory,
    sanitize_file_name,
    sanitize_text,
)

MOVIES_FOLDER = "Movies"
TV_SHOWS_FOLDER = "TV Shows"


def _format_year(year: Optional[int], missing_year_text: str) -> str:
    if year is None:
        return missing_year_text
    return str(year)


def _base_directory(source: SourceFile, root: Optional[Path], *parts: str, in_place: bool) -> Path:
    """
    Calcule le repertoire de base (nettoye avec l'ensemble des chemins).

    Args:
        source: Fichier source.
        root: Racine de destination (ignoree en mode sur place).
        parts: Sous-repertoires sous la racine.
        in_place: Mode sur place.

    Returns:
        Repertoire de base nettoye.
    """
    if in_place:
        return sanitize_directory(source.directory)

    if root is None:
        raise ValueError("Aucune racine de destination configuree")

    return sanitize_directory(root.joinpath(*parts))


def build_movie_destination(
    record: MetadataRecord,
    source: SourceFile,
    options: PlacementOptions,
) -> DestinationPath:
    """
    Calcule la destination d'un film.

    Format : Titre (Annee)[ - Oeuvre].ext

    Quand une oeuvre est presente hors mode sur place, le fichier est
    range dans un sous-repertoire au nom du titre (avant ajout du suffixe).

    Args:
        record: Metadonnees du film.
        source: Fichier source (repertoire et extension).
        options: Options de placement.

    Returns:
        DestinationPath du film.
    """
    directory = _base_directory(
        source, options.movies_root, MOVIES_FOLDER, in_place=options.in_place
    )

    year = _format_year(record.year, options.missing_year_text)
    stem = f"{sanitize_text(record.title)} ({year})"

    work = record.work_text
    if work:
        if not options.in_place:
            directory = directory / sanitize_file_name(stem)
        stem = f"{stem} - {sanitize_text(work)}"

    file_name = sanitize_file_name(f"{stem}{source.extension}")
    return DestinationPath(directory=directory, file_name=file_name)


def build_tv_destination(
    record: MetadataRecord,
    source: SourceFile,
    options: PlacementOptions,
) -> DestinationPath:
    """
    Calcule la destination d'un episode de serie.

    Format : Serie - sXXeYY - TitreEpisode[ - Oeuvre].ext
    Pour une partie d'episode : Serie - sXXeYY - partN[ - Oeuvre].ext

    Les numeros de saison et d'episode sont completes sur 2 chiffres
    minimum, le numero de partie est concatene tel quel.

    Args:
        record: Metadonnees de l'episode.
        source: Fichier source (repertoire et extension).
        options: Options de placement.

    Returns:
        DestinationPath de l'episode.
    """
    show_name = sanitize_text(record.show_name)
    season = record.season_number
    episode = record.episode_number

    directory = _base_directory(
        source,
        options.tv_root,
        TV_SHOWS_FOLDER,
        show_name,
        f"Season {season:02d}",
        in_place=options.in_place,
    )

    stem = f"{show_name} - s{season:02d}e{episode:02d}"

    if record.is_part:
        stem += f" - part{record.content_part}"
    else:
        stem += f" - {sanitize_text(record.title)}"

    work = record.work_text
    if work:
        stem += f" - {sanitize_text(work)}"

    file_name = sanitize_file_name(f"{stem}{source.extension}")
    return DestinationPath(directory=directory, file_name=file_name)


class PathBuilder:
    """
    Service de calcul des chemins de destination.

    Ce service est sans etat et peut etre utilise comme singleton.
    """

    def build_movie_destination(
        self,
        record: MetadataRecord,
        source: SourceFile,
        options: PlacementOptions,
    ) -> DestinationPath:
        """Voir build_movie_destination() pour les details."""
        return build_movie_destination(record, source, options)

    def build_tv_destination(
        self,
        record: MetadataRecord,
        source: SourceFile,
        options: PlacementOptions,
    ) -> DestinationPath:
        """Voir build_tv_destination() pour les details."""
        return build_tv_destination(record, source, options)
