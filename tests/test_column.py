from kubebrowse.column import NAME, NAMESPACE, Column


def test_new_column_lengths_follow_name():
    column = Column("RESTARTS")
    assert column.min_len == len("RESTARTS")
    assert column.max_len == len("RESTARTS")
    assert column.data_len == len("RESTARTS")
    assert not column.is_fixed
    assert not column.to_right


def test_bound_never_shorter_than_name():
    column = Column.bound("STATUS", 2, 3, True)
    assert column.min_len == len("STATUS")
    assert column.max_len == len("STATUS")
    assert column.to_right
    assert not column.is_fixed


def test_bound_uses_larger_limits():
    column = Column.bound("IP", 7, 15, False)
    assert column.min_len == 7
    assert column.max_len == 15
    assert column.data_len == len("IP")
    assert not column.to_right


def test_fixed_column():
    column = Column.fixed("AGE", 6, True)
    assert column.is_fixed
    assert column.to_right
    assert column.min_len == 6
    assert column.max_len == 6
    assert column.data_len == 6


def test_fixed_column_name_longer_than_length():
    column = Column.fixed("RESTARTS", 2, False)
    assert column.min_len == len("RESTARTS")
    assert column.data_len == 2


def test_predefined_columns():
    namespace = NAMESPACE.copy()
    assert namespace.name == "NAMESPACE"
    assert (namespace.min_len, namespace.max_len, namespace.data_len) == (11, 11, 11)
    assert not namespace.is_fixed
    name = NAME.copy()
    assert name.name == "NAME"
    assert (name.min_len, name.max_len, name.data_len) == (6, 6, 6)
    assert not name.to_right


def test_copy_is_independent():
    column = NAME.copy()
    assert column == NAME
    column.data_len = 0
    assert NAME.data_len == 6
    assert column != NAME