import pytest

from densetable.core.errors import IndexOutOfRange
from densetable.core.readable import ReadableTable
from densetable.core.table import Table

SOURCE = [
    [1, 2, 3, 4, 5],
    [2, 3, 4, 5, 9999],
    [3, 4, 555, 6, 7],
    [10, 11, 101, 22, 2],
]


@pytest.fixture()
def table() -> Table:
    return Table.create_from_source(SOURCE, element_type="Integer")


@pytest.mark.parametrize("row,col", [(-1, 0), (4, 0), (0, -1), (0, 5), (10, 10)])
def test_get_out_of_range(table: Table, row: int, col: int) -> None:
    with pytest.raises(IndexOutOfRange, match="out of range"):
        table.get(row, col)


def test_get_does_not_expose_slack(table: Table) -> None:
    # column 5 exists physically (capacity 7) but is outside the logical region
    with pytest.raises(IndexOutOfRange):
        table.get(0, 5)
    with pytest.raises(IndexOutOfRange):
        table.get(4, 0)


def test_row_clone_is_independent(table: Table) -> None:
    row = table.get_row_clone(2)
    assert row == [3, 4, 555, 6, 7]
    row[0] = -1
    assert table.get(2, 0) == 3


def test_col_clone_is_independent(table: Table) -> None:
    col = table.get_col_clone(4)
    assert col == [5, 9999, 7, 2]
    col.clear()
    assert table.get(1, 4) == 9999


def test_row_and_col_clone_bounds(table: Table) -> None:
    with pytest.raises(IndexOutOfRange):
        table.get_row_clone(4)
    with pytest.raises(IndexOutOfRange):
        table.get_col_clone(-1)


def test_underlying_clone_includes_slack(table: Table) -> None:
    raw = table.get_underlying_clone()
    assert len(raw) == 6 * 7
    assert raw[7:12] == [2, 3, 4, 5, 9999]
    assert raw[5:7] == [None, None]
    raw[0] = "changed"
    assert table.get(0, 0) == 1


def test_is_index_valid(table: Table) -> None:
    assert table.is_index_valid(0, 0)
    assert table.is_index_valid(3, 4)
    assert not table.is_index_valid(4, 0)
    assert not table.is_index_valid(0, 5)
    assert not table.is_index_valid(-1, 0)


def test_transpose_swaps_shape_and_capacity(table: Table) -> None:
    t = table.transpose()
    assert (t.rows, t.cols) == (5, 4)
    assert (t.row_capacity, t.col_capacity) == (7, 6)
    for r in range(table.rows):
        for c in range(table.cols):
            assert t.get(c, r) == table.get(r, c)
    assert type(t) is Table
    assert t.element_type == "Integer"


def test_transpose_leaves_source_unchanged(table: Table) -> None:
    table.transpose()
    assert table.to_lists() == SOURCE


def test_transpose_twice_equals_original(table: Table) -> None:
    assert table.transpose().transpose() == table


def test_copy_keeps_capacity(table: Table) -> None:
    c = table.copy()
    assert c == table
    assert c is not table
    assert (c.row_capacity, c.col_capacity) == (6, 7)


def test_copy_and_trim(table: Table) -> None:
    trimmed = table.copy_and_trim()
    assert (trimmed.row_capacity, trimmed.col_capacity) == (trimmed.rows, trimmed.cols)
    assert trimmed == table
    assert len(trimmed.get_underlying_clone()) == 20


def test_equality_ignores_capacity() -> None:
    a = Table.create_with_size_capacity(2, 2, 9, 9)
    a.set(0, 0, 1).set(0, 1, 2).set(1, 0, 3).set(1, 1, 4)
    b = ReadableTable.create_from_source([[1, 2], [3, 4]])
    assert a == b
    assert hash(a) == hash(b)


def test_inequality() -> None:
    a = Table.create_from_source([[1, 2], [3, 4]])
    assert a != Table.create_from_source([[1, 2], [3, 5]])
    assert a != Table.create_from_source([[1, 2, 3], [4, 5, 6]])
    assert a != [[1, 2], [3, 4]]


def test_element_type_name() -> None:
    assert Table.create_empty(int).element_type_name == "int"
    assert Table.create_empty("Integer").element_type_name == "Integer"
    assert Table.create_empty().element_type_name == "Unknown"


def test_repr_summary(table: Table) -> None:
    assert repr(table) == "Table<Integer>(rows=4, cols=5, row_capacity=6, col_capacity=7)"
