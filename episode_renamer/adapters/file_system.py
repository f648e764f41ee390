"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem : parcours de l'arborescence
source et operations de reconciliation (creation de repertoires,
deplacement, copie, suppression).
"""

import errno
import os
import shutil
import stat
import uuid
from pathlib import Path
from typing import Iterator

from loguru import logger

from episode_renamer.core.entities import SourceFile
from episode_renamer.core.ports.file_system import IFileSystem


def _is_hidden(name: str, file_stat: os.stat_result) -> bool:
    """Fichier cache : nom en point (POSIX) ou attribut cache (Windows)."""
    if name.startswith("."):
        return True
    attributes = getattr(file_stat, "st_file_attributes", 0)
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def _log_walk_error(error: OSError) -> None:
    logger.debug("Repertoire inaccessible ignore: {path}", path=error.filename)


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Le parcours ignore silencieusement (niveau DEBUG) les entrees cachees
    et inaccessibles. Les operations de modification propagent les OSError.
    """

    def iter_files(self, root: Path, recursive: bool = False) -> Iterator[SourceFile]:
        """
        Parcourt les fichiers d'un repertoire, repertoire par repertoire.

        Les repertoires caches ne sont pas explores.

        Args:
            root: Repertoire a parcourir
            recursive: Descend dans les sous-repertoires

        Yields:
            SourceFile pour chaque fichier visible et accessible
        """
        for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
            if recursive:
                dirnames[:] = [name for name in dirnames if not name.startswith(".")]
            else:
                dirnames.clear()

            directory = Path(dirpath)
            for filename in filenames:
                path = directory / filename
                try:
                    file_stat = path.stat()
                except OSError:
                    logger.debug("Fichier inaccessible ignore: {path}", path=str(path))
                    continue

                if not stat.S_ISREG(file_stat.st_mode):
                    continue

                if _is_hidden(filename, file_stat):
                    continue

                yield SourceFile(path=path, size_bytes=file_stat.st_size)

    def exists(self, path: Path) -> bool:
        """Verifie si un fichier existe."""
        return path.is_file()

    def get_size(self, path: Path) -> int:
        """
        Recupere la taille du fichier en octets.

        Retourne 0 si le fichier n'existe pas.
        """
        try:
            return path.stat().st_size
        except OSError:
            return 0

    def make_dirs(self, directory: Path) -> None:
        """Cree le repertoire et ses parents, sans erreur s'il existe."""
        directory.mkdir(parents=True, exist_ok=True)

    def move(self, source: Path, destination: Path) -> None:
        """
        Deplace un fichier en ecrasant la destination.

        Utilise os.replace sur le meme filesystem. Entre deux filesystems,
        passe par une copie temporaire renommee sur la destination, puis
        supprime la source.

        Args:
            source: Chemin du fichier source
            destination: Chemin de destination

        Raises:
            OSError: Si le deplacement echoue.
        """
        try:
            os.replace(source, destination)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise

        # Cross-filesystem: copie intermediaire avec fichier temporaire
        temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{destination.name}")
        try:
            shutil.copy2(source, temp)
            os.replace(temp, destination)
        except OSError:
            if temp.exists():
                temp.unlink()
            raise
        source.unlink()

    def copy(self, source: Path, destination: Path) -> None:
        """Copie un fichier (avec ses metadonnees) en ecrasant la destination."""
        shutil.copy2(source, destination)

    def delete(self, path: Path) -> None:
        """Supprime un fichier."""
        path.unlink()
