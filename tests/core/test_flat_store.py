import logging

from densetable.core.store import FlatStore


def _filled() -> FlatStore:
    s = FlatStore(2, 4, rows=2, cols=3)
    s.write_row(0, [1, 2, 3])
    s.write_row(1, [4, 5, 6])
    return s


def test_allocation_and_flat_index() -> None:
    s = FlatStore(3, 4, rows=2, cols=2)
    assert len(s.data) == 12
    assert all(v is None for v in s.data)
    # stride is col_capacity, not cols
    assert s.flat_index(1, 1) == 5
    assert s.flat_index(2, 3) == 11


def test_raw_get_set_roundtrip() -> None:
    s = FlatStore(2, 3, rows=2, cols=2)
    s.raw_set(1, 0, "x")
    assert s.raw_get(1, 0) == "x"
    assert s.raw_get_flat(3) == "x"
    s.raw_set_flat(4, "y")
    assert s.raw_get(1, 1) == "y"


def test_read_row_excludes_slack() -> None:
    s = _filled()
    s.raw_set_flat(3, "slack")
    assert s.read_row(0) == [1, 2, 3]


def test_realloc_rows_keeps_stride() -> None:
    s = _filled()
    s.realloc_rows(5)
    assert s.row_capacity == 5
    assert s.col_capacity == 4
    assert len(s.data) == 20
    assert s.data[4:7] == [4, 5, 6]
    assert s.read_row(1) == [4, 5, 6]


def test_realloc_cols_moves_rows_to_new_stride() -> None:
    s = _filled()
    s.realloc_cols(6)
    assert s.col_capacity == 6
    assert len(s.data) == 12
    assert s.data[6:9] == [4, 5, 6]
    assert s.read_row(0) == [1, 2, 3]


def test_realloc_both_axes() -> None:
    s = _filled()
    s.realloc(3, 3)
    assert (s.row_capacity, s.col_capacity) == (3, 3)
    assert len(s.data) == 9
    assert s.data[3:6] == [4, 5, 6]
    assert s.data[6:] == [None, None, None]


def test_realloc_replaces_buffer() -> None:
    s = _filled()
    old = s.data
    s.realloc_rows(4)
    assert s.data is not old


def test_clone_is_independent() -> None:
    s = _filled()
    c = s.clone()
    c.raw_set(0, 0, 99)
    assert s.raw_get(0, 0) == 1
    assert c.data[:3] == [99, 2, 3]
    assert (c.row_capacity, c.col_capacity) == (s.row_capacity, s.col_capacity)


def test_touch_bumps_version() -> None:
    s = FlatStore(1, 1)
    assert s.version == 0
    s.touch()
    s.touch()
    assert s.version == 2


def test_realloc_logs_debug_event(caplog) -> None:
    s = _filled()
    with caplog.at_level(logging.DEBUG, logger="densetable.core.store"):
        s.realloc_rows(6)
        s.realloc_cols(8)
        s.realloc(7, 9)
    assert "densetable.realloc.rows" in caplog.messages
    assert "densetable.realloc.cols" in caplog.messages
    assert "densetable.realloc.both" in caplog.messages
