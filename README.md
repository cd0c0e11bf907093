# kubebrowse

Data structures and logic for a terminal browser of Kubernetes resources.

## Modules

- `kubebrowse.filterable_list.FilterableList` is a list that keeps a filtered view.
  `filter(predicate)` sets the view. `filter_reset()` drops it. Iteration, `len()`
  and indexing see only the matching items. `full_iter()` and `full_len()` see the
  whole list. Any change to the underlying list clears the filter. This covers
  `insert`, `append`, `full_sort_by`, `full_retain` and `clear`.
  `full_sort_by` takes a three-way compare function and sorts stably.
- `kubebrowse.column.Column` describes one header column: its name, whether it
  is fixed or right aligned, and its minimum, maximum and data lengths. You can
  build one with `Column(name)`, `Column.bound(...)` or `Column.fixed(...)`.
  `NAMESPACE` and `NAME` are preset columns.
- `kubebrowse.header.Header` holds a group column, a name column, optional extra
  columns and a fixed `AGE` column. It returns the header text with
  `get_text(view, group_width, name_width, force_width)` for a `ViewType`, which
  is `NAME`, `COMPACT` or `FULL`. It works out column widths for a terminal width
  with `get_widths` and `get_full_widths`, and it tracks the data length of each
  column.
- `kubebrowse.item.Row` is the abstract contract for row data. It covers `uid`,
  `group`, `name`, `get_name` and `column_text`, and gives default name matching
  with `contains`, `starts_with` and `is_equal`. `kubebrowse.item.Item` wraps a
  row and adds the flags `is_active`, `is_selected`, `is_dirty` and `is_fixed`.
- `kubebrowse.scrollable_list.ScrollableList` is a list of `Item`s with:
  - a highlighted item;
  - paging (`update_page`, `get_page`, `get_paged_names`);
  - selection, with names grouped by the row's group;
  - stable sorting by column, in which fixed items compare as equal;
  - a name filter.

  `process_key(Key.UP)` and the other movement keys move the highlight. The call
  returns `Response.HANDLED` for `HOME`, `UP`, `PAGE_UP`, `DOWN`, `PAGE_DOWN` and
  `END`, and `Response.NOT_HANDLED` for any other key.
- `kubebrowse.config` contains `Config`, which holds `current_context`, a list of
  `ContextInfo` entries (name, namespace, kind) and an optional `theme` value. It
  is stored as YAML. The module also provides `default_config_path()`, which
  returns `HOME/.kubebrowse/config.yaml`, or `config.yaml` when there is no home
  directory.
- `kubebrowse.discovery` contains `ApiResource`, `ApiCapabilities`, `Scope` and
  `KindRef`, plus two functions:
  - `find_resource(entries, name)` matches the kind or the plural name. The match
    ignores ASCII case. It also accepts `name.group`. Without a group, the entry
    with the smallest group wins.
  - `list_kinds(entries)` returns a `KindRef` for every entry that supports the
    `list` verb, in the order given.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from kubebrowse.filterable_list import FilterableList

items = FilterableList(["abc", "bcd", "cde"])
items.filter(lambda s: "bc" in s)
print(list(items))              # ['abc', 'bcd']
print(list(items.full_iter()))  # ['abc', 'bcd', 'cde']
```

Configuration:

```python
from kubebrowse.config import Config

config = Config.load_or_create("config.yaml")
index = config.context_index("dev")
print(config.get_kind("dev"), config.get_namespace("dev"))
config.save("config.yaml")
```

`Config.load`, `Config.load_or_create` and `Config.save` accept an optional path.
Without one they use `default_config_path()`. The three calls behave as follows:

- `Config.load` raises `ConfigError` when the file cannot be read or parsed. The
  error's `serialization` attribute is `True` when the content is malformed and
  `False` when the file cannot be accessed.
- `Config.load_or_create` returns a default configuration when the content is
  malformed, and leaves the file untouched. When the file cannot be read, it
  writes a default configuration to the path and returns it.
- `Config.save` does not create missing directories.

## What this package does not do

There is no command, terminal screen or event loop here. Nothing connects to a
Kubernetes cluster, runs discovery or watches resources. Discovery entries have
to be built by the caller. The `theme` value in the configuration is stored and
written back as it is, without any meaning attached to it.