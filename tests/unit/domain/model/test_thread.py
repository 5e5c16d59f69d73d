"""Unit tests for thread entities."""

import pytest

from forum.domain.error import DataTypeMismatchError, MissingPropertyError
from forum.domain.model import AddedThread, NewThread


class TestNewThread:
    """Tests for NewThread payload validation."""

    def test_missing_property_raises(self):
        with pytest.raises(MissingPropertyError) as exc_info:
            NewThread.model_validate({"title": "abc"})

        assert exc_info.value.code == "NEW_THREAD.NOT_CONTAIN_NEEDED_PROPERTY"
        assert exc_info.value.message == (
            "tidak dapat membuat thread baru karena properti yang dibutuhkan tidak ada"
        )

    @pytest.mark.parametrize("blank", [None, ""])
    def test_blank_property_counts_as_missing(self, blank):
        with pytest.raises(MissingPropertyError):
            NewThread.model_validate({"title": blank, "body": "isi"})

    def test_wrong_type_raises(self):
        with pytest.raises(DataTypeMismatchError) as exc_info:
            NewThread.model_validate({"title": 123, "body": True})

        assert exc_info.value.code == "NEW_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION"
        assert exc_info.value.message == (
            "tidak dapat membuat thread baru karena tipe data tidak sesuai"
        )

    def test_missing_is_reported_before_wrong_type(self):
        """A payload both mistyped and incomplete reports the missing field."""
        with pytest.raises(MissingPropertyError):
            NewThread.model_validate({"title": 123})

    def test_non_mapping_payload_raises_type_error(self):
        with pytest.raises(DataTypeMismatchError):
            NewThread.model_validate(["title", "body"])

    def test_valid_payload(self):
        new_thread = NewThread(title="sebuah thread", body="sebuah body thread")

        assert new_thread.title == "sebuah thread"
        assert new_thread.body == "sebuah body thread"

    def test_unknown_keys_are_ignored(self):
        new_thread = NewThread.model_validate(
            {"title": "t", "body": "b", "owner": "user-999"}
        )

        assert not hasattr(new_thread, "owner")


class TestAddedThread:
    """Tests for AddedThread validation."""

    def test_missing_property_raises(self):
        with pytest.raises(MissingPropertyError) as exc_info:
            AddedThread.model_validate({"id": "thread-123", "title": "t"})

        assert exc_info.value.code == "ADDED_THREAD.NOT_CONTAIN_NEEDED_PROPERTY"

    def test_wrong_type_raises(self):
        with pytest.raises(DataTypeMismatchError) as exc_info:
            AddedThread.model_validate({"id": 123, "title": "t", "owner": "user-1"})

        assert exc_info.value.code == "ADDED_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION"

    def test_valid_payload(self):
        added = AddedThread(id="thread-123", title="t", owner="user-123")

        assert added.id == "thread-123"
        assert added.owner == "user-123"
