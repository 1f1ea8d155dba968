"""Tests for the tree materializer (uber_scaffold.materializer).

Covers:
- Byte-for-byte writes, lazy directory creation, missing base directory
- Overwrite semantics and idempotent reruns
- Per-file callback order
- Path containment enforcement
- Partial reports on I/O failure
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from uber_scaffold.errors import MaterializeError, ScaffoldError, TemplatePathError
from uber_scaffold.materializer import TreeMaterializer, _write_entry
from uber_scaffold.models import TemplateEntry, TemplateTable

pytestmark = pytest.mark.unit


class TestMaterialize:
    async def test_writes_every_entry_verbatim(self, tmp_path, small_table, read_tree):
        report = await TreeMaterializer(tmp_path).materialize(small_table.entries)

        assert read_tree(tmp_path) == {
            e.path: e.content.encode("utf-8") for e in small_table.entries
        }
        assert report.written_paths() == small_table.paths()
        assert report.base_dir == tmp_path

    async def test_creates_missing_base_and_nested_dirs(self, tmp_path, small_table):
        base = tmp_path / "does" / "not" / "exist"
        await TreeMaterializer(base).materialize(small_table.entries)

        assert (base / "src" / "components").is_dir()
        assert (base / "src" / "components" / "Card.jsx").is_file()

    async def test_empty_table_still_creates_base(self, tmp_path):
        base = tmp_path / "empty"
        report = await TreeMaterializer(base).materialize([])
        assert base.is_dir()
        assert report.file_count == 0

    async def test_bytes_written_counts_utf8(self, tmp_path, small_table):
        report = await TreeMaterializer(tmp_path).materialize(small_table.entries)
        card = next(f for f in report.files if f.relative_path.endswith("Card.jsx"))
        assert card.bytes_written == len("<p>{pickup} → {dropoff}</p>".encode("utf-8"))
        assert card.path == tmp_path / "src" / "components" / "Card.jsx"

    async def test_no_newline_translation(self, tmp_path):
        entry = TemplateEntry(path="crlf.txt", content="a\r\nb\nc")
        await TreeMaterializer(tmp_path).materialize([entry])
        assert (tmp_path / "crlf.txt").read_bytes() == b"a\r\nb\nc"


class TestOverwrite:
    async def test_overwrites_longer_prior_file(self, tmp_path):
        target = tmp_path / "a.txt"
        target.write_text("a much longer previous body", encoding="utf-8")

        report = await TreeMaterializer(tmp_path).materialize(
            [TemplateEntry(path="a.txt", content="short")]
        )

        assert target.read_text(encoding="utf-8") == "short"
        assert report.files[0].overwritten is True

    async def test_second_run_is_identical(self, tmp_path, small_table, read_tree):
        materializer = TreeMaterializer(tmp_path)
        first = await materializer.materialize(small_table.entries)
        snapshot = read_tree(tmp_path)
        second = await materializer.materialize(small_table.entries)

        assert read_tree(tmp_path) == snapshot
        assert first.written_paths() == second.written_paths()
        assert not any(f.overwritten for f in first.files)
        assert all(f.overwritten for f in second.files)

    async def test_unrelated_files_left_alone(self, tmp_path, small_table):
        keep = tmp_path / "notes.md"
        keep.write_text("mine", encoding="utf-8")
        await TreeMaterializer(tmp_path).materialize(small_table.entries)
        assert keep.read_text(encoding="utf-8") == "mine"


class TestCallback:
    async def test_called_once_per_file_in_order(self, tmp_path, small_table):
        seen: list[str] = []
        materializer = TreeMaterializer(
            tmp_path, on_file_written=lambda r: seen.append(r.relative_path)
        )
        await materializer.materialize(small_table.entries)
        assert seen == small_table.paths()

    async def test_callback_sees_file_on_disk(self, tmp_path, small_table):
        def check(result):
            assert result.path.read_bytes() == small_table.get(result.relative_path).content.encode()

        await TreeMaterializer(tmp_path, on_file_written=check).materialize(small_table.entries)


class TestContainment:
    def test_resolve_inside_base(self, tmp_path):
        entry = TemplateEntry(path="pages/index.jsx", content="")
        assert TreeMaterializer(tmp_path).resolve(entry) == tmp_path / "pages" / "index.jsx"

    async def test_symlink_escape_rejected(self, tmp_path):
        base = tmp_path / "base"
        outside = tmp_path / "outside"
        base.mkdir()
        outside.mkdir()
        (base / "link").symlink_to(outside, target_is_directory=True)

        entry = TemplateEntry(path="link/evil.txt", content="x")
        with pytest.raises(TemplatePathError) as excinfo:
            await TreeMaterializer(base).materialize([entry])

        assert isinstance(excinfo.value, ScaffoldError)
        assert not (outside / "evil.txt").exists()


class TestFailure:
    async def test_partial_report_on_write_failure(self, tmp_path, small_table):
        calls = {"n": 0}

        def flaky(path, entry):
            calls["n"] += 1
            if calls["n"] == 2:
                raise PermissionError(13, "Permission denied", str(path))
            return _write_entry(path, entry)

        with patch("uber_scaffold.materializer._write_entry", side_effect=flaky):
            with pytest.raises(MaterializeError) as excinfo:
                await TreeMaterializer(tmp_path).materialize(small_table.entries)

        err = excinfo.value
        assert err.report.written_paths() == ["package.json"]
        assert err.path == tmp_path / "src" / "index.js"
        assert isinstance(err.__cause__, PermissionError)
        # Third entry never attempted, first left in place.
        assert calls["n"] == 2
        assert (tmp_path / "package.json").is_file()
        assert not (tmp_path / "src" / "components" / "Card.jsx").exists()

    async def test_base_dir_creation_failure(self, tmp_path, small_table):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(MaterializeError) as excinfo:
            await TreeMaterializer(blocker / "sub").materialize(small_table.entries)

        assert excinfo.value.report.file_count == 0
        assert isinstance(excinfo.value.__cause__, OSError)

    async def test_directory_in_the_way_of_file(self, tmp_path):
        (tmp_path / "a.txt").mkdir()
        table = TemplateTable.from_mapping("t", {"a.txt": "x"})
        with pytest.raises(MaterializeError):
            await TreeMaterializer(tmp_path).materialize(table.entries)
