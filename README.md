# filefinder

Find files by exact name under a directory tree, or across every drive of
the machine, and optionally keep only text files that contain a given
string (case-insensitive).

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
filefinder --help
filefinder NAME
filefinder NAME --directory /some/path
filefinder NAME --text "needle"
filefinder NAME --all-drives
```

- `NAME` is the exact entry name to look for.
- `-d`, `--directory` is the directory to search in; it defaults to the
  current directory.
- `-t`, `--text` keeps only matches that are text files with a line
  containing this string, ignoring case.
- `--all-drives` searches every drive instead of one directory (on Windows
  each existing drive letter, elsewhere `/`); paths are then shown relative
  to the current directory.

Each match is printed on its own line as its path relative to the search
directory, a tab, and its size in binary units (`bytes`, `KiB`, `MiB`, ...),
followed by a line such as `3 file(s) found (Double click on a file to open it)`.

## Library use

```python
from filefinder.search import search_file, search_roots, find_files
from filefinder.results import build_rows, found_message

paths = search_file("/home/me/projects", "README.md")
rows = build_rows(paths, "/home/me/projects")
for row in rows:
    print(row.relative_path, row.size_text)
print(found_message(len(rows)))
```

### `filefinder.search`

- `search_file(dir_path, file_name)` walks one tree, visiting entries in
  case-insensitive name order, and returns the absolute paths of regular
  files named exactly `file_name`. A missing directory gives an empty list;
  unreadable directories are skipped.
- `FileSearcher(dir_path, file_name, results, lock)` is a thread that walks
  `dir_path` and appends to `results`, under `lock`, every entry (file or
  directory) whose name equals `file_name`. `stop()` ends the walk before
  the next entry.
- `search_roots(roots, file_name)` runs one `FileSearcher` per root, waits
  for all of them and returns the collected paths.
- `list_drives()` gives the file-system roots to search when no directory
  is chosen.
- `is_text_file(path)` judges by the guessed MIME type, or, failing that,
  by sniffing the first bytes for NUL bytes and valid UTF-8.
- `find_files(files, text, should_cancel)` keeps the files that hold `text`
  on some line, ignoring case, and skips (with a logged warning) files that
  are not text. `should_cancel`, if given, is a callable checked before each
  file and each line; once it returns true the scan stops and the files
  found so far are returned.

### `filefinder.results`

- `FoundFile` is a result row with `path`, `relative_path` and `size`, plus
  the properties `tooltip` (the path with native separators) and
  `size_text`. `FoundFile.from_path(path, base_dir)` builds one, using size
  0 when the file cannot be read.
- `build_rows(paths, base_dir)` makes a `FoundFile` for each path.
- `format_data_size(size)` formats a byte count, e.g. `1.00 KiB`.
- `found_message(count)` is the summary line.
- `to_native_separators(path)` replaces `/` with the platform separator.

### `filefinder.cli`

- `run_search(name, text, directory)` combines the above and returns the
  sorted rows the command prints; with no directory every drive is searched.
- `main(argv)` is the `filefinder` command.

## What it does not do

There is no graphical window: results are printed, not shown in a table,
and the package does not open found files or copy their names to the
clipboard.