"""
Ports (interfaces abstraites) du domaine.

Les adaptateurs dans adapters/ implementent ces interfaces :
- IFileSystem : parcours de la source et operations de reconciliation
- ITagReader : extraction des metadonnees embarquees
"""

from episode_renamer.core.ports.file_system import IFileSystem
from episode_renamer.core.ports.tag_reader import (
    CorruptFileError,
    ITagReader,
    TagReaderError,
    UnsupportedFormatError,
)

__all__ = [
    "IFileSystem",
    "ITagReader",
    "TagReaderError",
    "UnsupportedFormatError",
    "CorruptFileError",
]
