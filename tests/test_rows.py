from slate.rows import RowEmphasis, RowState


def test_default_emphasis_is_medium():
    row = RowState(["Inbox", "3"])
    assert row.emphasis is RowEmphasis.MEDIUM


def test_cells_are_kept_in_order():
    row = RowState(["a", "b", "c"])
    assert row.cells == ["a", "b", "c"]


def test_rows_with_same_content_are_equal():
    first = RowState(["x"], RowEmphasis.LOW)
    second = RowState(["x"], RowEmphasis.LOW)
    assert first.cells == ["x"]
    assert second.emphasis is RowEmphasis.LOW
    assert first == second


def test_rows_with_different_emphasis_differ():
    assert (RowState(["x"], RowEmphasis.LOW) == RowState(["x"], RowEmphasis.HIGH)) is False


def test_default_rows_do_not_share_cells():
    first = RowState()
    second = RowState()
    first.cells.append("only here")
    assert second.cells == []