"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- tagging/ : Lecture des tags MP4 (mutagen)
- file_system : Parcours et opérations sur le système de fichiers

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from episode_renamer.adapters.file_system import FileSystemAdapter
from episode_renamer.adapters.tagging.mp4_tag_reader import Mp4TagReader

__all__ = [
    "FileSystemAdapter",
    "Mp4TagReader",
]
