import pytest

from densetable.core.errors import IllegalCapacity, InconsistentColumnSize, InvalidDimension
from densetable.core.readable import ReadableTable
from densetable.core.table import Table

SOURCE = [
    [1, 2, 3, 4, 5],
    [2, 3, 4, 5, 9999],
    [3, 4, 555, 6, 7],
    [10, 11, 101, 22, 2],
]


def test_create_empty_default_capacity() -> None:
    t = Table.create_empty()
    assert (t.rows, t.cols) == (0, 0)
    assert (t.row_capacity, t.col_capacity) == (5, 5)
    assert len(t.get_underlying_clone()) == 25


def test_create_empty_explicit_capacity() -> None:
    t = Table.create_empty(int, row_capacity=2, col_capacity=7)
    assert (t.row_capacity, t.col_capacity) == (2, 7)
    assert t.element_type is int


def test_create_with_size_capacity_is_three_halves() -> None:
    t = Table.create_with_size(4, 5)
    assert (t.rows, t.cols) == (4, 5)
    assert (t.row_capacity, t.col_capacity) == (6, 7)


def test_create_with_size_cells_default_to_none() -> None:
    t = Table.create_with_size(3, 3)
    assert t.get(0, 0) is None
    assert (t.row_capacity, t.col_capacity) == (4, 4)


def test_create_with_size_default_fills_logical_region_only() -> None:
    t = Table.create_with_size(2, 2, 7)
    assert t.to_lists() == [[7, 7], [7, 7]]
    raw = t.get_underlying_clone()
    # capacity 3 x 3: slack column 2 and slack row 2 stay empty
    assert raw == [7, 7, None, 7, 7, None, None, None, None]


def test_create_with_size_zero() -> None:
    t = Table.create_with_size(0, 0)
    assert (t.row_capacity, t.col_capacity) == (0, 0)
    assert t.get_underlying_clone() == []


@pytest.mark.parametrize("rows,cols", [(-1, 0), (0, -1), (-3, -3)])
def test_create_with_size_rejects_negative(rows: int, cols: int) -> None:
    with pytest.raises(InvalidDimension, match="non-negative"):
        Table.create_with_size(rows, cols)


def test_create_with_capacity() -> None:
    t = Table.create_with_capacity(2, 3)
    assert (t.rows, t.cols) == (0, 0)
    assert (t.row_capacity, t.col_capacity) == (2, 3)
    with pytest.raises(InvalidDimension):
        Table.create_with_capacity(-1, 3)


def test_create_with_size_capacity() -> None:
    t = Table.create_with_size_capacity(2, 2, 4, 9)
    assert (t.rows, t.cols, t.row_capacity, t.col_capacity) == (2, 2, 4, 9)


@pytest.mark.parametrize("args", [(2, 2, 1, 5), (2, 3, 5, 2)])
def test_create_with_size_capacity_rejects_small_capacity(args: tuple[int, int, int, int]) -> None:
    with pytest.raises(IllegalCapacity):
        Table.create_with_size_capacity(*args)


@pytest.mark.parametrize("args", [(-1, 0, 0, 0), (0, 0, 0, -2)])
def test_create_with_size_capacity_rejects_negative(args: tuple[int, int, int, int]) -> None:
    with pytest.raises(InvalidDimension):
        Table.create_with_size_capacity(*args)


def test_create_from_source_concrete_scenario() -> None:
    t = Table.create_from_source(SOURCE, element_type="Integer")
    assert (t.rows, t.cols) == (4, 5)
    assert (t.row_capacity, t.col_capacity) == (6, 7)
    assert t.get(1, 4) == 9999
    assert t.to_lists() == SOURCE


def test_create_from_source_accepts_tuples() -> None:
    t = Table.create_from_source(((1, 2), (3, 4)))
    assert t.to_lists() == [[1, 2], [3, 4]]


def test_create_from_source_rejects_ragged() -> None:
    with pytest.raises(InconsistentColumnSize, match="at row 1"):
        Table.create_from_source([[1, 2, 3], [4, 5]])


def test_create_from_empty_source() -> None:
    t = Table.create_from_source([])
    assert (t.rows, t.cols) == (0, 0)
    assert (t.row_capacity, t.col_capacity) == (5, 5)


def test_create_from_source_copies_input() -> None:
    src = [[1, 2], [3, 4]]
    t = Table.create_from_source(src)
    src[0][0] = 100
    assert t.get(0, 0) == 1


def test_create_copy_duplicates_capacity_and_slack() -> None:
    t = Table.create_from_source([[1, 2], [3, 4]])
    t._store.raw_set(0, 2, "slack")
    c = Table.create_copy(t)
    assert (c.row_capacity, c.col_capacity) == (t.row_capacity, t.col_capacity)
    assert c.get_underlying_clone() == t.get_underlying_clone()
    c.set(0, 0, 9)
    assert t.get(0, 0) == 1


def test_factories_return_calling_class() -> None:
    assert type(Table.create_from_source([[1]])) is Table
    assert type(ReadableTable.create_from_source([[1]])) is ReadableTable
    assert type(Table.create_empty()) is Table
    assert not hasattr(ReadableTable.create_empty(), "set")
