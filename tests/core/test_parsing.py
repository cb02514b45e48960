"""Tests for converting dict-form operations into typed operations."""
import pytest

from line_patch.core.errors import InvalidOperationError
from line_patch.core.parsing import (
    coerce_diff,
    diff_from_dict,
    diff_from_operations,
    operation_from_dict,
)
from line_patch.core.types import (
    DeleteContent,
    DeleteRange,
    Diff,
    InsertAfter,
    InsertBefore,
    InsertBlock,
    ReplaceContent,
    ReplaceRange,
)


class TestOperationFromDict:
    @pytest.mark.parametrize(
        "data,expected",
        [
            ({"type": "insert_block", "lineNumber": 0, "lines": ["a"]}, InsertBlock(0, ("a",))),
            ({"type": "delete_range", "startLine": 1, "endLine": 2}, DeleteRange(1, 2)),
            (
                {"type": "replace_range", "startLine": 2, "endLine": 2, "lines": ["x", "y"]},
                ReplaceRange(2, 2, ("x", "y")),
            ),
            (
                {"type": "insert_after", "searchContent": "return", "content": "x"},
                InsertAfter("return", "x", 1),
            ),
            (
                {"type": "insert_before", "searchContent": "def", "content": "#", "occurrence": 2},
                InsertBefore("def", "#", 2),
            ),
            (
                {"type": "replace_content", "oldContent": "a\nb", "newContent": "c"},
                ReplaceContent("a\nb", "c", 1),
            ),
            ({"type": "delete_content", "content": "gone", "occurrence": 3}, DeleteContent("gone", 3)),
        ],
    )
    def test_camel_case_wire_form(self, data, expected):
        assert operation_from_dict(data) == expected

    def test_snake_case_keys_accepted(self):
        op = operation_from_dict({"type": "delete_range", "start_line": 3, "end_line": 4})
        assert op == DeleteRange(3, 4)

    def test_null_occurrence_defaults_to_one(self):
        op = operation_from_dict({"type": "delete_content", "content": "x", "occurrence": None})
        assert op.occurrence == 1

    def test_to_dict_round_trips(self):
        op = ReplaceRange(1, 3, ("a", "b"))
        assert operation_from_dict(op.to_dict()) == op

    def test_unknown_type(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            operation_from_dict({"type": "rename_file"})
        assert exc_info.value.field == "type"
        assert "insert_block" in exc_info.value.hint

    def test_missing_field(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            operation_from_dict({"type": "insert_after", "content": "x"})
        err = exc_info.value
        assert err.field == "searchContent"
        assert err.operation == "insert_after"

    @pytest.mark.parametrize("bad", ["3", 2.5, True, None])
    def test_non_integer_line_number(self, bad):
        with pytest.raises(InvalidOperationError):
            operation_from_dict({"type": "insert_block", "lineNumber": bad, "lines": []})

    def test_lines_must_be_strings(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            operation_from_dict({"type": "insert_block", "lineNumber": 0, "lines": ["a", 1]})
        assert exc_info.value.field == "lines"

    def test_occurrence_must_be_positive(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            operation_from_dict({"type": "delete_content", "content": "x", "occurrence": 0})
        assert exc_info.value.field == "occurrence"

    def test_negative_line_numbers_left_to_engine(self):
        # Bounds are validated against the live line count when applied.
        assert operation_from_dict({"type": "delete_range", "startLine": -1, "endLine": 2}) == DeleteRange(-1, 2)

    def test_non_mapping(self):
        with pytest.raises(InvalidOperationError):
            operation_from_dict(["insert_block"])


class TestDiffParsing:
    def test_diff_from_dict(self):
        diff = diff_from_dict(
            {"operations": [{"type": "delete_range", "startLine": 1, "endLine": 1}]}
        )
        assert diff.operations == [DeleteRange(1, 1)]

    def test_missing_operations_list(self):
        with pytest.raises(InvalidOperationError):
            diff_from_dict({"ops": []})

    def test_error_carries_index(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            diff_from_operations(
                [
                    {"type": "delete_range", "startLine": 1, "endLine": 1},
                    {"type": "insert_block", "lineNumber": 0},
                ]
            )
        assert exc_info.value.index == 1

    def test_to_dict_round_trips(self):
        diff = Diff(operations=[InsertBlock(0, ("a",)), DeleteContent("b")])
        assert diff_from_dict(diff.to_dict()) == diff


class TestCoerceDiff:
    def test_diff_passes_through(self):
        diff = Diff()
        assert coerce_diff(diff) is diff

    def test_mixed_list(self):
        diff = coerce_diff([DeleteRange(1, 1), {"type": "delete_content", "content": "x"}])
        assert diff.operations == [DeleteRange(1, 1), DeleteContent("x")]

    def test_dict_form(self):
        assert len(coerce_diff({"operations": []})) == 0
