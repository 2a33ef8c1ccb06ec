# pcskit

Helpers for a command-line cloud-storage client. Each module can be used on
its own, and none needs anything beyond the standard library.

## Modules

- `pcskit.args`: `parse_args(argv, to_text=None)` turns a command line
  (program path first) into an `Args` object. `Args` holds `name` (the program
  file name), `cmd` (the first non-option token), `args` (the tokens after the
  command), `opts` (a dict of options) and `optc`. `--name=value` gives one long
  option with a value, `--name` gives one with the value `None`, and `-abc`
  gives the flags `a`, `b` and `c`. Naming an option twice raises
  `ArgumentError`. `to_text`, if given, converts option values and arguments.
  `Args` has `has_opt`, `get_opt` (raises `KeyError` if absent), `remove_opt`,
  `has_opts` (how many of the names were given), `count_unknown_opts` and
  `is_valid(min_argc, max_argc, *known_opts)`.
- `pcskit.hashtable`: `Hashtable(capacity=17, ignore_case=False)` is a chained
  hashtable keyed by `str` or `bytes`. Entries are matched by two 32-bit hashes
  of the key (`hash2`, `hash3`) and bucketed by a third (`hash1`). It provides
  `add` (raises `KeyError` on a duplicate), `set` (returns the old value),
  `remove` (returns the value, raises `KeyError` if absent), `get`, `clear`,
  `expand`, `keys`, `in`, `len()`, and iteration over the values. With
  `ignore_case`, ASCII capitals in keys are folded.
- `pcskit.cache`: `WriteCache(fp)` collects `Block`s (`start`, `data`, `size`)
  in order of offset. `add(start, data)` copies the data into a new block.
  `flush()` seeks to each block's offset in `fp` and writes it, and raises
  `OSError` on a short write or when there is no file. `reset()` drops every
  block. `total_size` is the number of bytes added.
- `pcskit.localfs`:
  - `get_local_file_info(path)` returns a `LocalFileInfo` (`path`, `filename`,
    `isdir`, `mtime`, `size`, `parent`, `filecount`, `userdata`), or `None` if
    the path is missing or is neither a regular file nor a directory.
  - `get_directory_files(directory, recursive=False, on=None)` lists entries
    with paths relative to `directory`. It calls `on(info, parent)` for each
    one and keeps a recursive entry count in each directory's `filecount`.
  - `set_file_last_modify_time(path, mtime)` sets the file's times.
  - `create_directory_recursive(path)` works like `mkdir -p`, creating
    directories with mode `0o750`. It raises `NotADirectoryError` when a file
    is in the way.
  - `delete_file_recursive(path)` works like `rm -r`; a missing path is not an
    error.
- `pcskit.errmsg`: English messages for login, general API, share,
  offline-download, purchase and purchase-record error codes
  (`get_login_errmsg`, `get_errmsg_by_errno`, `get_share_errmsg_by_errno`,
  `get_download_errmsg_by_errno`, `get_buy_errmsg_by_errno`,
  `get_record_errmsg_by_errno`). An unknown code gives a generic message.
- `pcskit.jsonnode`: `JsonNode` is a JSON tree node with a `JsonType`.
  - Constructors: `null`, `true`, `false`, `boolean`, `number`, `string`,
    `array`, `object`, `from_numbers`, `from_strings`.
  - Member access: `item`, `get` (the name is matched without regard to ASCII
    case), `append`, `add`, `detach`/`detach_index`, `delete`/`delete_index`,
    `replace`/`replace_index`, `duplicate`.
- `pcskit.jsontext`: `parse`, `parse_with_end(text, require_end=False)`,
  `dumps` (tab-indented), `dumps_unformatted` (compact) and `minify`.
  - The parser also accepts single-quoted strings and `//` and `/* */`
    comments.
  - Failures raise `JsonParseError`, whose `position` marks the fault.
- `pcskit.version`: `full_name(version="v0.3.1", api_version=None, debug=False)`
  builds the display name, e.g. `pcs v0.3.1`. `PROGRAM_FULL_NAME` holds the
  default.

## Install

```
pip install .
```

## Examples

```python
from pcskit.args import parse_args

args = parse_args(["pcs", "list", "-r", "--sort=name", "/docs"])
args.cmd                # "list"
args.args               # ["/docs"]
args.get_opt("sort")    # "name"
args.is_valid(0, 1, "r", "sort")   # True
```

```python
from pcskit.jsontext import parse, dumps_unformatted

node = parse("{'a': [1, 2, /* note */ 3]}")
dumps_unformatted(node)   # '{"a":[1,2,3]}'
```

```python
from pcskit.hashtable import Hashtable

table = Hashtable(17, ignore_case=True)
table.add("Name", 1)
"name" in table          # True
```

## What it does not do

This is a library only. It has no command-line program and no shell. It does
not talk to any storage service: there is no login, upload, download or
network code. The error-message tables only turn codes into text.

## Tests

```
pip install .[test]
pytest
```