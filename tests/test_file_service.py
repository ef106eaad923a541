"""
Tests for file service and action policies — critical for safe file deletion.
The original (first-seen) file must never be removed; a failed removal must not raise.
"""
import os
import pytest
from unittest import mock
from dedupr.core.actions import DeletePolicy, RecordOnlyPolicy, make_policy
from dedupr.core.errors import DeleteError
from dedupr.core.models import FileRecord
from dedupr.services.file_service import FileService


class TestDeleteFile:
    """Permanent removal."""

    def test_removes_file(self, tmp_path):
        test_file = tmp_path / "test.txt"
        test_file.write_text("content to delete")

        FileService.delete_file(str(test_file))

        assert not test_file.exists()

    def test_raises_delete_error_for_nonexistent_file(self, tmp_path):
        nonexistent = tmp_path / "does_not_exist.txt"

        with pytest.raises(DeleteError, match="Could not delete") as exc_info:
            FileService.delete_file(str(nonexistent))
        assert exc_info.value.path == str(nonexistent)


class TestMoveToTrash:
    """Removal via send2trash (mocked: the real trash location is OS-dependent)."""

    def test_calls_send2trash_with_absolute_path(self, tmp_path, monkeypatch):
        test_file = tmp_path / "my photo.jpg"
        test_file.write_text("content")
        monkeypatch.chdir(tmp_path)

        with mock.patch("dedupr.services.file_service.send2trash") as trash:
            FileService.move_to_trash("my photo.jpg")

        trash.assert_called_once_with(os.path.join(os.getcwd(), "my photo.jpg"))

    def test_symlink_is_trashed_not_its_target(self, tmp_path):
        target = tmp_path / "original.txt"
        target.write_text("content")
        link = tmp_path / "link.txt"
        try:
            link.symlink_to(target)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")

        with mock.patch("dedupr.services.file_service.send2trash") as trash:
            FileService.move_to_trash(str(link))

        trash.assert_called_once_with(str(link))

    def test_dangling_symlink_can_be_trashed(self, tmp_path):
        link = tmp_path / "dangling.txt"
        try:
            link.symlink_to(tmp_path / "gone.txt")
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")

        with mock.patch("dedupr.services.file_service.send2trash") as trash:
            FileService.move_to_trash(str(link))

        trash.assert_called_once_with(str(link))

    def test_raises_delete_error_for_nonexistent_file(self, tmp_path):
        with pytest.raises(DeleteError, match="File not found"):
            FileService.move_to_trash(str(tmp_path / "missing.txt"))

    def test_wraps_send2trash_failure(self, tmp_path):
        test_file = tmp_path / "locked.txt"
        test_file.write_text("content")

        with mock.patch("dedupr.services.file_service.send2trash", side_effect=OSError("no trash")):
            with pytest.raises(DeleteError, match="Failed to move to trash"):
                FileService.move_to_trash(str(test_file))

    def test_remove_dispatches_on_use_trash(self, tmp_path):
        test_file = tmp_path / "a.txt"
        test_file.write_text("content")

        with mock.patch.object(FileService, "move_to_trash") as trash, \
                mock.patch.object(FileService, "delete_file") as delete:
            FileService.remove(str(test_file), use_trash=True)
            FileService.remove(str(test_file), use_trash=False)

        trash.assert_called_once_with(str(test_file))
        delete.assert_called_once_with(str(test_file))


class TestActionPolicies:

    def test_make_policy(self):
        assert isinstance(make_policy(delete=False), RecordOnlyPolicy)
        policy = make_policy(delete=True, use_trash=True)
        assert isinstance(policy, DeletePolicy)
        assert policy.use_trash is True
        assert policy.deletes is True

    def test_record_only_policy_keeps_files(self, tmp_path):
        original = tmp_path / "a.txt"
        duplicate = tmp_path / "b.txt"
        original.write_text("same")
        duplicate.write_text("same")
        record = FileRecord(file=str(original), size=4, hash="h", duplicates=[str(duplicate)])

        assert RecordOnlyPolicy().apply(str(duplicate), record) is None
        assert duplicate.exists()

    def test_delete_policy_removes_duplicate_only(self, tmp_path):
        original = tmp_path / "a.txt"
        duplicate = tmp_path / "b.txt"
        original.write_text("same")
        duplicate.write_text("same")
        record = FileRecord(file=str(original), size=4, hash="h", duplicates=[str(duplicate)])

        assert DeletePolicy().apply(str(duplicate), record) is None
        assert original.exists()
        assert not duplicate.exists()

    def test_delete_policy_refuses_to_delete_original(self, tmp_path):
        original = tmp_path / "a.txt"
        original.write_text("same")
        record = FileRecord(file=str(original), size=4, hash="h")

        error = DeletePolicy().apply(str(original), record)

        assert isinstance(error, DeleteError)
        assert original.exists()

    def test_delete_failure_is_returned_not_raised(self, tmp_path):
        record = FileRecord(file=str(tmp_path / "a.txt"), size=4, hash="h",
                            duplicates=[str(tmp_path / "gone.txt")])

        error = DeletePolicy().apply(str(tmp_path / "gone.txt"), record)

        assert isinstance(error, DeleteError)
        assert record.duplicates == [str(tmp_path / "gone.txt")]

    def test_delete_policy_uses_trash_when_asked(self, tmp_path):
        duplicate = tmp_path / "b.txt"
        duplicate.write_text("same")
        record = FileRecord(file=str(tmp_path / "a.txt"), size=4, hash="h", duplicates=[str(duplicate)])

        with mock.patch("dedupr.services.file_service.send2trash") as trash:
            assert DeletePolicy(use_trash=True).apply(str(duplicate), record) is None

        trash.assert_called_once()

    @pytest.mark.parametrize("use_trash", [False, True])
    def test_delete_policy_refuses_symlink_to_original(self, tmp_path, use_trash):
        original = tmp_path / "1.txt"
        original.write_text("same")
        link = tmp_path / "2.txt"
        try:
            link.symlink_to(original)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")
        record = FileRecord(file=str(original), size=4, hash="h", duplicates=[str(link)])

        with mock.patch("dedupr.services.file_service.send2trash") as trash:
            error = DeletePolicy(use_trash=use_trash).apply(str(link), record)

        assert isinstance(error, DeleteError)
        assert "same file" in error.message
        trash.assert_not_called()
        assert original.exists() and link.is_symlink()

    def test_delete_policy_refuses_target_of_symlinked_original(self, tmp_path):
        """The original is a link to a file found later; removing the target would break it."""
        target = tmp_path / "real.txt"
        target.write_text("same")
        original = tmp_path / "0-link.txt"
        try:
            original.symlink_to(target)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")
        record = FileRecord(file=str(original), size=4, hash="h", duplicates=[str(target)])

        error = DeletePolicy().apply(str(target), record)

        assert isinstance(error, DeleteError)
        assert target.exists()
