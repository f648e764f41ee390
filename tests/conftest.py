"""
Fixtures pytest partagees pour les tests Episode Renamer.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, ITagReader) et du journal
- MetadataRecord types (film, episode)
- Options de placement par defaut
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from episode_renamer.core.entities import SourceFile
from episode_renamer.core.ports.file_system import IFileSystem
from episode_renamer.core.ports.tag_reader import ITagReader
from episode_renamer.core.value_objects import (
    MediaKind,
    MetadataRecord,
    PlacementOptions,
)


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut la destination n'existe pas.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.get_size.return_value = 0
    mock.iter_files.return_value = iter(())
    return mock


@pytest.fixture
def mock_tag_reader() -> MagicMock:
    """Mock de ITagReader (aucun tag Apple par defaut)."""
    mock = MagicMock(spec=ITagReader)
    mock.read.return_value = None
    return mock


@pytest.fixture
def mock_logger() -> MagicMock:
    """Journal injecte dans les services."""
    return MagicMock()


@pytest.fixture
def movie_record() -> MetadataRecord:
    """MetadataRecord pour un film type."""
    return MetadataRecord(kind=MediaKind.MOVIE, title="Alpha", year=2001)


@pytest.fixture
def episode_record() -> MetadataRecord:
    """MetadataRecord pour un episode type."""
    return MetadataRecord(
        kind=MediaKind.TV_SHOW,
        title="Pilot",
        show_name="Beta",
        season_number=1,
        episode_number=3,
    )


@pytest.fixture
def mp4_source() -> SourceFile:
    """Fichier source .mp4 non vide."""
    return SourceFile(path=Path("/downloads/file.mp4"), size_bytes=1000)


@pytest.fixture
def placement_options() -> PlacementOptions:
    """Options par defaut : copie vers /m et /t."""
    return PlacementOptions.resolve(Path("/m"), Path("/t"))
