"""
Tests unitaires pour le service de reconciliation.

Ce module teste les decisions deplacement/copie/abandon, le mode
simulation et le remplacement d'une destination existante, avec des
mocks puis avec de vrais fichiers.
"""

from dataclasses import replace
from pathlib import Path

import pytest

from episode_renamer.adapters.file_system import FileSystemAdapter
from episode_renamer.core.entities import SourceFile
from episode_renamer.core.value_objects import DestinationPath, PlacementOptions
from episode_renamer.services.reconciler import (
    ReconcileAction,
    Reconciler,
    SkipReason,
)

DESTINATION = DestinationPath(directory=Path("/m/Movies"), file_name="Alpha (2001).mp4")


# ====================
# Fixtures
# ====================


@pytest.fixture
def reconciler(mock_file_system, mock_logger) -> Reconciler:
    """Reconciler avec mocks."""
    return Reconciler(file_system=mock_file_system, logger=mock_logger)


def _existing_destination(mock_file_system, size: int) -> None:
    """Destination presente ; la source existe toujours."""
    mock_file_system.exists.return_value = True
    mock_file_system.get_size.return_value = size


def _assert_no_mutation(mock_file_system) -> None:
    mock_file_system.make_dirs.assert_not_called()
    mock_file_system.move.assert_not_called()
    mock_file_system.copy.assert_not_called()
    mock_file_system.delete.assert_not_called()


# ====================
# Tests des abandons
# ====================


class TestSkips:
    """Tests pour les cas ignores."""

    def test_no_destination_is_unclassified(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        result = reconciler.reconcile(mp4_source, None, placement_options)

        assert result.action is ReconcileAction.SKIPPED
        assert result.reason is SkipReason.UNCLASSIFIED
        assert result.destination is None
        _assert_no_mutation(mock_file_system)

    @pytest.mark.parametrize("move", [True, False])
    @pytest.mark.parametrize("dry_run", [True, False])
    @pytest.mark.parametrize("in_place", [True, False])
    def test_same_length_is_skipped(
        self, reconciler, mock_file_system, mock_logger, mp4_source, move, dry_run, in_place
    ) -> None:
        """Meme taille = doublon presume, quel que soit le mode."""
        _existing_destination(mock_file_system, size=mp4_source.size_bytes)
        options = PlacementOptions.resolve(
            Path("/m"), move=move, dry_run=dry_run, in_place=in_place
        )

        result = reconciler.reconcile(mp4_source, DESTINATION, options)

        assert result.skipped
        assert result.reason is SkipReason.SAME_LENGTH
        assert result.destination == DESTINATION.path
        _assert_no_mutation(mock_file_system)
        mock_logger.debug.assert_called_once()


# ====================
# Tests du mode deplacement
# ====================


class TestMove:
    """Tests pour le mode deplacement."""

    def test_move_to_new_destination(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        options = replace(placement_options, move=True)

        result = reconciler.reconcile(mp4_source, DESTINATION, options)

        assert result.action is ReconcileAction.MOVED
        mock_file_system.make_dirs.assert_called_once_with(Path("/m/Movies"))
        mock_file_system.move.assert_called_once_with(mp4_source.path, DESTINATION.path)
        mock_file_system.copy.assert_not_called()

    def test_move_over_different_length_copies_then_deletes(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        _existing_destination(mock_file_system, size=5)
        options = replace(placement_options, move=True)

        result = reconciler.reconcile(mp4_source, DESTINATION, options)

        assert result.action is ReconcileAction.REPLACED_BY_MOVE
        mock_file_system.move.assert_not_called()
        mock_file_system.copy.assert_called_once_with(mp4_source.path, DESTINATION.path)
        mock_file_system.delete.assert_called_once_with(mp4_source.path)

    def test_replace_by_move_skips_delete_if_source_gone(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        mock_file_system.get_size.return_value = 5
        mock_file_system.exists.side_effect = lambda path: path == DESTINATION.path
        options = replace(placement_options, move=True)

        result = reconciler.reconcile(mp4_source, DESTINATION, options)

        assert result.action is ReconcileAction.REPLACED_BY_MOVE
        mock_file_system.copy.assert_called_once()
        mock_file_system.delete.assert_not_called()

    def test_in_place_move_over_existing_renames_directly(
        self, reconciler, mock_file_system, mp4_source
    ) -> None:
        _existing_destination(mock_file_system, size=5)
        options = PlacementOptions.resolve(in_place=True, move=True)

        result = reconciler.reconcile(mp4_source, DESTINATION, options)

        assert result.action is ReconcileAction.MOVED
        mock_file_system.move.assert_called_once_with(mp4_source.path, DESTINATION.path)
        mock_file_system.copy.assert_not_called()
        mock_file_system.delete.assert_not_called()

    def test_move_logs_info(
        self, reconciler, mock_file_system, mock_logger, mp4_source, placement_options
    ) -> None:
        reconciler.reconcile(mp4_source, DESTINATION, replace(placement_options, move=True))

        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.kwargs == {
            "source": str(mp4_source.path),
            "destination": str(DESTINATION.path),
        }

    def test_filesystem_error_propagates(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        mock_file_system.move.side_effect = PermissionError("denied")

        with pytest.raises(OSError):
            reconciler.reconcile(mp4_source, DESTINATION, replace(placement_options, move=True))


# ====================
# Tests du mode copie
# ====================


class TestCopy:
    """Tests pour le mode copie."""

    def test_copy_to_new_destination(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        result = reconciler.reconcile(mp4_source, DESTINATION, placement_options)

        assert result.action is ReconcileAction.COPIED
        mock_file_system.make_dirs.assert_called_once_with(Path("/m/Movies"))
        mock_file_system.copy.assert_called_once_with(mp4_source.path, DESTINATION.path)
        mock_file_system.move.assert_not_called()
        mock_file_system.delete.assert_not_called()

    def test_copy_over_existing(
        self, reconciler, mock_file_system, mp4_source, placement_options
    ) -> None:
        _existing_destination(mock_file_system, size=5)

        result = reconciler.reconcile(mp4_source, DESTINATION, placement_options)

        assert result.action is ReconcileAction.REPLACED_BY_COPY
        mock_file_system.copy.assert_called_once_with(mp4_source.path, DESTINATION.path)
        mock_file_system.delete.assert_not_called()


# ====================
# Tests du mode simulation
# ====================


class TestDryRun:
    """Aucune modification en simulation."""

    @pytest.mark.parametrize(
        "move,in_place,existing_size,expected",
        [
            (True, False, None, ReconcileAction.WOULD_MOVE),
            (True, False, 5, ReconcileAction.WOULD_REPLACE_BY_MOVE),
            (True, True, 5, ReconcileAction.WOULD_MOVE),
            (False, False, None, ReconcileAction.WOULD_COPY),
            (False, False, 5, ReconcileAction.WOULD_REPLACE_BY_COPY),
            (False, True, None, ReconcileAction.WOULD_COPY),
        ],
    )
    def test_dry_run_never_mutates(
        self, reconciler, mock_file_system, mp4_source, move, in_place, existing_size, expected
    ) -> None:
        if existing_size is not None:
            _existing_destination(mock_file_system, size=existing_size)
        options = PlacementOptions.resolve(
            Path("/m"), move=move, in_place=in_place, dry_run=True
        )

        result = reconciler.reconcile(mp4_source, DESTINATION, options)

        assert result.action is expected
        _assert_no_mutation(mock_file_system)


# ====================
# Tests avec fichiers reels
# ====================


class TestReconcileReal:
    """Tests d'integration avec FileSystemAdapter."""

    @pytest.fixture
    def source_file(self, tmp_path) -> SourceFile:
        path = tmp_path / "downloads" / "raw.mp4"
        path.parent.mkdir()
        path.write_bytes(b"new content" * 10)
        return SourceFile(path=path, size_bytes=path.stat().st_size)

    @pytest.fixture
    def destination(self, tmp_path) -> DestinationPath:
        return DestinationPath(
            directory=tmp_path / "library" / "Movies", file_name="Alpha (2001).mp4"
        )

    @pytest.fixture
    def real_reconciler(self, mock_logger) -> Reconciler:
        return Reconciler(FileSystemAdapter(), logger=mock_logger)

    def test_copy_creates_directories(self, real_reconciler, source_file, destination, tmp_path) -> None:
        options = PlacementOptions.resolve(tmp_path / "library")

        result = real_reconciler.reconcile(source_file, destination, options)

        assert result.action is ReconcileAction.COPIED
        assert destination.path.read_bytes() == source_file.path.read_bytes()
        assert source_file.path.exists()

    def test_move_removes_source(self, real_reconciler, source_file, destination, tmp_path) -> None:
        options = PlacementOptions.resolve(tmp_path / "library", move=True)

        result = real_reconciler.reconcile(source_file, destination, options)

        assert result.action is ReconcileAction.MOVED
        assert destination.path.exists()
        assert not source_file.path.exists()

    def test_replace_by_move(self, real_reconciler, source_file, destination, tmp_path) -> None:
        destination.directory.mkdir(parents=True)
        destination.path.write_bytes(b"old")
        options = PlacementOptions.resolve(tmp_path / "library", move=True)

        result = real_reconciler.reconcile(source_file, destination, options)

        assert result.action is ReconcileAction.REPLACED_BY_MOVE
        assert destination.path.read_bytes() == b"new content" * 10
        assert not source_file.path.exists()

    def test_same_length_leaves_both_files(self, real_reconciler, source_file, destination, tmp_path) -> None:
        destination.directory.mkdir(parents=True)
        destination.path.write_bytes(b"x" * source_file.size_bytes)
        options = PlacementOptions.resolve(tmp_path / "library", move=True)

        result = real_reconciler.reconcile(source_file, destination, options)

        assert result.reason is SkipReason.SAME_LENGTH
        assert source_file.path.exists()
        assert destination.path.read_bytes() == b"x" * source_file.size_bytes

    def test_dry_run_creates_nothing(self, real_reconciler, source_file, destination, tmp_path) -> None:
        options = PlacementOptions.resolve(tmp_path / "library", move=True, dry_run=True)

        result = real_reconciler.reconcile(source_file, destination, options)

        assert result.action is ReconcileAction.WOULD_MOVE
        assert not (tmp_path / "library").exists()
        assert source_file.path.exists()
