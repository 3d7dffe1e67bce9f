"""Command-line front end for finding files."""

from __future__ import annotations

import argparse
import os
import sys

from filefinder.results import FoundFile, build_rows, found_message
from filefinder.search import find_files, list_drives, search_roots


def run_search(name, text="", directory=None) -> list[FoundFile]:
    """Find entries named ``name``, optionally holding ``text``, under ``directory``.

    Without a directory every drive is searched.
    """
    if directory:
        base = os.path.normpath(os.path.abspath(os.fspath(directory)))
        roots = [base]
    else:
        base = os.getcwd()
        roots = list_drives()
    paths = search_roots(roots, name)
    if text:
        paths = find_files(paths, text)
    return build_rows(sorted(paths), base)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="filefinder", description="Search files by name.")
    parser.add_argument("name", help="exact file name to look for")
    parser.add_argument("-t", "--text", default="", help="text the file must contain")
    parser.add_argument(
        "-d",
        "--directory",
        default=os.getcwd(),
        help="directory to search in (default: current directory)",
    )
    parser.add_argument(
        "--all-drives", action="store_true", help="search every drive instead"
    )
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    directory = None if args.all_drives else args.directory
    rows = run_search(args.name, args.text, directory)
    for row in rows:
        print(f"{row.relative_path}\t{row.size_text}")
    print(found_message(len(rows)))
    return 0


if __name__ == "__main__":
    sys.exit(main())