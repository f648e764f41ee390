"""
Tests unitaires pour le Classifier.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from episode_renamer.core.value_objects import MediaKind, MetadataRecord
from episode_renamer.services.classifier import Classifier, classify
from episode_renamer.services.path_builder import PathBuilder


@pytest.fixture
def mock_path_builder() -> MagicMock:
    return MagicMock(spec=PathBuilder)


@pytest.fixture
def classifier(mock_path_builder, mock_logger) -> Classifier:
    return Classifier(path_builder=mock_path_builder, logger=mock_logger)


class TestClassify:
    """Tests pour la fonction classify."""

    @pytest.mark.parametrize("kind", list(MediaKind))
    def test_returns_record_kind(self, kind: MediaKind) -> None:
        assert classify(MetadataRecord(kind=kind)) is kind


class TestBuildDestination:
    """Tests pour l'aiguillage vers le PathBuilder."""

    def test_movie_dispatch(
        self, classifier, mock_path_builder, movie_record, mp4_source, placement_options
    ) -> None:
        result = classifier.build_destination(movie_record, mp4_source, placement_options)

        mock_path_builder.build_movie_destination.assert_called_once_with(
            movie_record, mp4_source, placement_options
        )
        mock_path_builder.build_tv_destination.assert_not_called()
        assert result is mock_path_builder.build_movie_destination.return_value

    def test_tv_dispatch(
        self, classifier, mock_path_builder, episode_record, mp4_source, placement_options
    ) -> None:
        result = classifier.build_destination(episode_record, mp4_source, placement_options)

        mock_path_builder.build_tv_destination.assert_called_once_with(
            episode_record, mp4_source, placement_options
        )
        mock_path_builder.build_movie_destination.assert_not_called()
        assert result is mock_path_builder.build_tv_destination.return_value

    def test_unclassified_returns_none_and_logs_info(
        self, classifier, mock_path_builder, mock_logger, mp4_source, placement_options
    ) -> None:
        record = MetadataRecord(kind=MediaKind.UNCLASSIFIED, title="Mystery")

        result = classifier.build_destination(record, mp4_source, placement_options)

        assert result is None
        mock_path_builder.build_movie_destination.assert_not_called()
        mock_path_builder.build_tv_destination.assert_not_called()
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.kwargs["file"] == "file.mp4"

    def test_with_real_path_builder(self, mock_logger, movie_record, mp4_source, placement_options) -> None:
        classifier = Classifier(PathBuilder(), logger=mock_logger)
        result = classifier.build_destination(movie_record, mp4_source, placement_options)
        assert result.path == Path("/m/Movies/Alpha (2001).mp4")
