"""Unit tests for core/filters.py -- pure logic, no I/O, no mocking needed.

Tests call filter_deleted() directly with inline data.
"""

from core.filters import filter_deleted
from core.models import is_deleted

# ---------------------------------------------------------------------------
# Inline data helpers
# ---------------------------------------------------------------------------


def _item(item_id, content="x", deleted=False, completed=False):
    return {"id": item_id, "content": content, "completed": completed, "deleted": deleted}


class TestFilterDeleted:
    def test_empty_input_yields_empty_output(self):
        assert filter_deleted([]) == []

    def test_deleted_items_removed(self):
        items = [
            {"id": 1, "content": "milk", "deleted": False},
            {"id": 2, "content": "eggs", "deleted": True},
        ]
        assert filter_deleted(items) == [{"id": 1, "content": "milk", "deleted": False}]

    def test_no_deleted_items_returns_equivalent_collection(self):
        items = [_item(1), _item(2), _item(3)]
        result = filter_deleted(items)
        assert result == items
        assert [i["id"] for i in result] == [1, 2, 3]

    def test_order_of_survivors_preserved(self):
        items = [_item(5), _item(4, deleted=True), _item(3), _item(2, deleted=True), _item(1)]
        assert [i["id"] for i in filter_deleted(items)] == [5, 3, 1]

    def test_all_deleted_yields_empty(self):
        assert filter_deleted([_item(1, deleted=True), _item(2, deleted=True)]) == []

    def test_missing_deleted_field_is_kept(self):
        # Absence of the flag must not hide data.
        item = {"id": 7, "content": "no flag"}
        assert filter_deleted([item]) == [item]

    def test_non_boolean_truthy_flag_is_kept(self):
        # Only a literal True hides a record.
        items = [_item(1, deleted="true"), _item(2, deleted=1)]
        assert len(filter_deleted(items)) == 2

    def test_other_fields_passed_through_unchanged(self):
        item = {"id": 9, "content": "bread", "completed": True, "deleted": False, "userId": 42}
        [result] = filter_deleted([item])
        assert result == {"id": 9, "content": "bread", "completed": True, "deleted": False, "userId": 42}

    def test_input_not_mutated(self):
        items = [_item(1), _item(2, deleted=True)]
        snapshot = [dict(i) for i in items]
        filter_deleted(items)
        assert items == snapshot

    def test_returns_new_list(self):
        items = [_item(1)]
        assert filter_deleted(items) is not items

    def test_accepts_any_iterable(self):
        assert [i["id"] for i in filter_deleted(iter([_item(1), _item(2, deleted=True)]))] == [1]

    def test_output_never_longer_and_never_contains_deleted(self):
        collections = [
            [],
            [_item(1)],
            [_item(1, deleted=True)],
            [_item(i, deleted=i % 2 == 0) for i in range(10)],
            [{"id": 1}, _item(2, deleted=True), {"id": 3, "deleted": None}],
        ]
        for items in collections:
            result = filter_deleted(items)
            assert len(result) <= len(items)
            assert all(i.get("deleted") is not True for i in result)


class TestIsDeleted:
    def test_true_flag(self):
        assert is_deleted({"deleted": True}) is True

    def test_false_flag(self):
        assert is_deleted({"deleted": False}) is False

    def test_missing_flag(self):
        assert is_deleted({}) is False
