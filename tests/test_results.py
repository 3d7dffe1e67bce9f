import os

from filefinder.results import (
    FoundFile,
    build_rows,
    format_data_size,
    found_message,
    to_native_separators,
)


def test_to_native_separators():
    assert to_native_separators("a/b/c") == os.sep.join(["a", "b", "c"])


def test_format_data_size_bytes():
    assert format_data_size(0) == "0 bytes"
    assert format_data_size(1023) == f"{1023} bytes"


def test_format_data_size_units():
    assert format_data_size(1024) == "1.00 KiB"
    assert format_data_size(1024 * 1024) == "1.00 MiB"
    assert format_data_size(3 * 1024 ** 3).endswith(" GiB")


def test_format_data_size_grows_monotonically_within_unit():
    assert float(format_data_size(2048).split()[0]) < float(format_data_size(4096).split()[0])


def test_found_message():
    assert found_message(3) == "3 file(s) found (Double click on a file to open it)"


def test_found_file_from_path(tmp_path):
    (tmp_path / "sub").mkdir()
    target = tmp_path / "sub" / "a.txt"
    target.write_bytes(b"12345")
    row = FoundFile.from_path(str(target), str(tmp_path))
    assert row.path == str(target)
    assert row.relative_path == os.path.join("sub", "a.txt")
    assert row.size == 5
    assert row.size_text == format_data_size(5)
    assert row.tooltip == to_native_separators(str(target))


def test_found_file_missing_has_zero_size(tmp_path):
    row = FoundFile.from_path(str(tmp_path / "gone.txt"), str(tmp_path))
    assert row.size == 0
    assert row.relative_path == "gone.txt"


def test_build_rows_keeps_order(tmp_path):
    paths = [str(tmp_path / name) for name in ("z.txt", "a.txt")]
    for path in paths:
        with open(path, "w") as handle:
            handle.write("x")
    rows = build_rows(paths, tmp_path)
    assert [row.path for row in rows] == paths
    assert [row.relative_path for row in rows] == ["z.txt", "a.txt"]