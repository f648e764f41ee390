"""
Implementation du lecteur de tags MP4/iTunes avec mutagen.

Ce module fournit Mp4TagReader qui implemente ITagReader pour extraire
des atomes Apple le type de media, le titre, l'annee, la serie,
la saison, l'episode, l'oeuvre et le numero de partie.
"""

from pathlib import Path
from typing import Any, Optional

from mutagen import File as MutagenFile
from mutagen import MutagenError
from mutagen.mp4 import MP4

from episode_renamer.core.ports.tag_reader import (
    CorruptFileError,
    ITagReader,
    UnsupportedFormatError,
)
from episode_renamer.core.value_objects import MetadataRecord, kind_from_signals

# Valeurs de l'atome "stik" (media kind)
STIK_MOVIE = 9
STIK_TV_SHOW = 10

# Separateur des noms de serie multiples
SHOW_NAME_SEPARATOR = "; "


class Mp4TagReader(ITagReader):
    """
    Lecteur de tags Apple (atomes iTunes) utilisant mutagen.

    Le fichier est ouvert dans un bloc with : le descripteur est
    toujours ferme avant le retour, y compris en cas d'erreur.
    """

    # Atomes iTunes lus
    MEDIA_KIND = "stik"
    TITLE = "\xa9nam"
    YEAR = "\xa9day"
    WORK = "\xa9wrk"
    SHOW_NAME = "tvsh"
    SEASON_NUMBER = "tvsn"
    EPISODE_NUMBER = "tves"
    CONTENT_ID = "cnID"

    def read(self, path: Path) -> Optional[MetadataRecord]:
        """
        Extrait les metadonnees Apple d'un fichier.

        Args:
            path: Chemin complet vers le fichier

        Returns:
            MetadataRecord, ou None si le fichier n'est pas un MP4 tague.

        Raises:
            UnsupportedFormatError: mutagen ne reconnait pas le conteneur.
            CorruptFileError: Le conteneur ne peut pas etre lu.
        """
        try:
            with open(path, "rb") as fileobj:
                media_file = MutagenFile(fileobj)
        except MutagenError as e:
            raise CorruptFileError(path, str(e)) from e
        except OSError as e:
            raise CorruptFileError(path, str(e)) from e

        if media_file is None:
            raise UnsupportedFormatError(path)

        if not isinstance(media_file, MP4) or media_file.tags is None:
            return None

        return self._build_record(media_file.tags)

    def _build_record(self, tags: Any) -> MetadataRecord:
        """
        Construit le MetadataRecord depuis les tags MP4.

        Les numeros absents valent 0, le type est reconstruit depuis
        les deux signaux film/serie de l'atome "stik".
        """
        media_kind = self._get_int(tags, self.MEDIA_KIND)
        kind = kind_from_signals(
            is_movie=media_kind == STIK_MOVIE,
            is_tv_show=media_kind == STIK_TV_SHOW,
        )

        content_part = self._get_int(tags, self.CONTENT_ID)

        return MetadataRecord(
            kind=kind,
            title=self._get_text(tags, self.TITLE) or "",
            year=self._parse_year(self._get_text(tags, self.YEAR)),
            show_name=SHOW_NAME_SEPARATOR.join(
                str(name) for name in tags.get(self.SHOW_NAME, [])
            ),
            season_number=self._get_int(tags, self.SEASON_NUMBER),
            episode_number=self._get_int(tags, self.EPISODE_NUMBER),
            content_part=content_part or None,
            work=self._get_text(tags, self.WORK),
        )

    @staticmethod
    def _get_text(tags: Any, atom: str) -> Optional[str]:
        """Retourne la premiere valeur texte d'un atome, ou None."""
        values = tags.get(atom)
        if not values:
            return None
        return str(values[0])

    @staticmethod
    def _get_int(tags: Any, atom: str) -> int:
        """Retourne la premiere valeur entiere d'un atome, ou 0."""
        values = tags.get(atom)
        if not values:
            return 0
        try:
            value = int(values[0])
        except (TypeError, ValueError):
            return 0
        # Entier non signe 32 bits
        return value if 0 <= value <= 0xFFFFFFFF else 0

    @staticmethod
    def _parse_year(text: Optional[str]) -> Optional[int]:
        """
        Extrait l'annee des 4 premiers caracteres de l'atome date.

        "2001" et "2001-05-04T07:00:00Z" donnent 2001 ; une valeur
        absente, non numerique ou nulle donne None.
        """
        if not text:
            return None

        candidate = text[:4]
        if len(candidate) < 4 or not candidate.isdigit():
            return None

        year = int(candidate)
        return year or None
