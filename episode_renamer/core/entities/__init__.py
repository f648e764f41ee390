"""
Entites du domaine.

- SourceFile : fichier candidat trouve lors du parcours de la source
"""

from episode_renamer.core.entities.source_file import SourceFile

__all__ = ["SourceFile"]
