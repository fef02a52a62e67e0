from pathlib import Path

import pytest

from pocket2wallabag.input import (
    list_export_files,
    read_physical_lines,
    reconstruct_records,
)


def test_reconstruct_records_joins_wrapped_title() -> None:
    lines = ["Title, with comma", "https://x.example/a,1700000000,tag1,unread"]

    records = list(reconstruct_records(lines))

    assert records == ["Title, with comma\nhttps://x.example/a,1700000000,tag1,unread"]


def test_reconstruct_records_emits_one_record_per_complete_line() -> None:
    lines = [
        "First,https://a.example/,1700000000,,archive",
        "Second,https://b.example/,1700000001,news|tech,unread",
    ]

    assert list(reconstruct_records(lines)) == lines


def test_reconstruct_records_flushes_incomplete_tail() -> None:
    lines = ["Ok,https://a.example/,1700000000,,unread", "dangling title"]

    assert list(reconstruct_records(lines)) == [lines[0], "dangling title"]


def test_read_physical_lines_skips_headers_and_blank_lines(tmp_path: Path) -> None:
    first = tmp_path / "part_1.csv"
    second = tmp_path / "part_2.csv"
    first.write_bytes(b"title,url,time_added,tags,status\r\nA,https://a.example/,1700000000,,unread\r\n\r\n")
    second.write_text("title,url,time_added,tags,status\nB,https://b.example/,1700000001,,archive\n", encoding="utf-8")

    lines = list(read_physical_lines(list_export_files(tmp_path)))

    assert lines == [
        "A,https://a.example/,1700000000,,unread",
        "B,https://b.example/,1700000001,,archive",
    ]


def test_list_export_files_requires_csv_files(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("nothing", encoding="utf-8")

    with pytest.raises(ValueError, match="No CSV export files"):
        list_export_files(tmp_path)

    with pytest.raises(ValueError, match="not found"):
        list_export_files(tmp_path / "missing")


def test_read_physical_lines_strips_byte_order_mark(tmp_path: Path) -> None:
    export = tmp_path / "export.csv"
    export.write_bytes(
        "\ufefftitle,url,time_added,tags,status\nA,https://a.example/,1700000000,,unread\n".encode("utf-8")
    )

    assert list(read_physical_lines([export])) == ["A,https://a.example/,1700000000,,unread"]


def test_reconstruct_records_requires_lowercase_status() -> None:
    lines = ["A,https://a.example/,1700000000,,ARCHIVE", "B,https://b.example/,1700000001,,archive"]

    assert list(reconstruct_records(lines)) == ["\n".join(lines)]
