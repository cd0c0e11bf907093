import pytest

from kubebrowse.column import NAME, NAMESPACE, Column
from kubebrowse.header import Header, ViewType


def make_header():
    extras = [
        Column.bound("READY", 7, 9, False),
        Column.fixed("STATUS", 10, False),
        Column.bound("RESTARTS", 10, 12, True),
    ]
    return Header(NAMESPACE.copy(), extras)


def test_default_header_column_count():
    header = Header()
    assert header.column_count() == 3
    assert header.extra_columns() is None


def test_column_count_with_extras():
    header = make_header()
    assert header.column_count() == 6
    assert [c.name for c in header.extra_columns()] == ["READY", "STATUS", "RESTARTS"]


def test_data_length_round_trip():
    header = make_header()
    header.set_data_length(0, 20)
    header.set_data_length(1, 30)
    header.set_data_length(2, 8)
    assert header.get_data_length(0) == 20
    assert header.get_data_length(1) == 30
    assert header.get_data_length(2) == 8


def test_fixed_and_age_columns_are_not_changed():
    header = make_header()
    fixed_before = header.get_data_length(3)
    age_before = header.get_data_length(5)
    header.set_data_length(3, 50)
    header.set_data_length(5, 50)
    assert header.get_data_length(3) == fixed_before
    assert header.get_data_length(5) == age_before


def test_unknown_column_length_is_na():
    assert make_header().get_data_length(99) == 3
    assert Header().get_data_length(99) == 3


def test_reset_data_lengths_keeps_fixed():
    header = make_header()
    fixed_len = header.get_data_length(3)
    header.reset_data_lengths()
    assert header.get_data_length(0) == 0
    assert header.get_data_length(1) == 0
    assert header.get_data_length(2) == 0
    assert header.get_data_length(4) == 0
    assert header.get_data_length(3) == fixed_len


def test_extra_space_from_first_right_aligned_column():
    restarts = Column.bound("RESTARTS", 10, 12, True)
    header = Header(NAMESPACE.copy(), [restarts])
    header.reset_data_lengths()
    header.recalculate_extra_columns()
    assert header.get_widths(0)[2] == restarts.min_len
    header.set_data_length(2, restarts.min_len)
    header.recalculate_extra_columns()
    assert header.get_widths(0)[2] == 0


def test_narrow_terminal_uses_minimum_widths():
    header = make_header()
    assert header.get_widths(0) == (0, NAME.min_len, header.get_widths(0)[2])
    group_width, name_width, _ = header.get_full_widths(0)
    assert group_width == NAMESPACE.min_len
    assert name_width == NAME.min_len


@pytest.mark.parametrize("terminal_width", [120, 200, 333])
def test_compact_text_fills_terminal(terminal_width):
    header = make_header()
    _, name_width, _ = header.get_widths(terminal_width)
    text = header.get_text(ViewType.COMPACT, 0, name_width, 0)
    assert len(text) == terminal_width
    assert text.startswith(" NAME")
    assert text.rstrip().endswith("AGE")


@pytest.mark.parametrize("terminal_width", [120, 200, 333])
def test_full_text_fills_terminal(terminal_width):
    header = make_header()
    group_width, name_width, _ = header.get_full_widths(terminal_width)
    text = header.get_text(ViewType.FULL, group_width, name_width, 0)
    assert len(text) == terminal_width
    assert text.startswith(" NAMESPACE")
    assert "RESTARTS" in text


def test_name_view():
    assert Header().get_text(ViewType.NAME, 0, 0, 0).strip() == "NAME"


def test_force_width_truncates():
    header = make_header()
    full = header.get_text(ViewType.COMPACT, 0, 40, 0)
    truncated = header.get_text(ViewType.COMPACT, 0, 40, 20)
    assert len(truncated) == 20
    assert full.startswith(truncated)


def test_force_width_larger_than_text_keeps_text():
    header = make_header()
    full = header.get_text(ViewType.COMPACT, 0, 40, 0)
    assert header.get_text(ViewType.COMPACT, 0, 40, len(full) + 10) == full


def test_extra_columns_text_follows_data_length():
    header = make_header()
    short = header.get_text(ViewType.COMPACT, 0, 10, 0)
    header.set_data_length(2, 9)
    header.recalculate_extra_columns()
    longer = header.get_text(ViewType.COMPACT, 0, 10, 0)
    assert len(longer) == len(short) + 2