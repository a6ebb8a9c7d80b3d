"""Tests for reading and writing JSON / TOML settings files."""

from __future__ import annotations

import errno
import json
import os
import stat
from pathlib import Path

import pytest

from clibundle.exceptions import UnsupportedFormat
from clibundle.settings import get_codec, read_document, write_document


class TestReadDocument:
    """Absent and corrupt files both read as an empty document."""

    def test_missing_json_is_empty(self, tmp_path: Path) -> None:
        assert read_document(tmp_path / "nope.json", "json") == {}

    def test_missing_toml_is_empty(self, tmp_path: Path) -> None:
        doc = read_document(tmp_path / "nope.toml", "toml")
        assert dict(doc) == {}

    def test_corrupt_json_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_document(path, "json") == {}

    def test_non_object_json_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert read_document(path, "json") == {}

    def test_corrupt_toml_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[api\nbase_url = ", encoding="utf-8")
        assert dict(read_document(path, "toml")) == {}

    def test_directory_in_place_of_file_is_empty(
        self,
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "settings.json"
        path.mkdir()
        assert read_document(path, "json") == {}

    def test_permission_denied_is_empty(
        self,
        tmp_path: Path,
        deny_reads,
    ) -> None:
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "settings.json").write_text('{"k": 1}', encoding="utf-8")
        deny_reads(locked)
        assert read_document(locked / "settings.json", "json") == {}

    def test_untraversable_parent_is_empty(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        # stat() on a path under a directory without search permission
        # fails with EACCES instead of ENOENT.
        locked = tmp_path / "locked"
        original_stat = Path.stat

        def stat_(self, *args, **kwargs):
            if self.parent == locked:
                raise PermissionError(errno.EACCES, "Permission denied")
            return original_stat(self, *args, **kwargs)

        def read_text(self, *args, **kwargs):
            raise PermissionError(errno.EACCES, "Permission denied")

        monkeypatch.setattr(Path, "stat", stat_)
        monkeypatch.setattr(Path, "read_text", read_text)
        assert dict(read_document(locked / "config.toml", "toml")) == {}

    def test_reads_existing_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"unrelated": {"x": 1}}', encoding="utf-8")
        assert read_document(path, "json") == {"unrelated": {"x": 1}}

    def test_reads_existing_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[api]\nbase_url = "u"\n', encoding="utf-8")
        doc = read_document(path, "toml")
        assert doc["api"]["base_url"] == "u"

    def test_unsupported_format_raises(self, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFormat) as exc_info:
            read_document(tmp_path / "x.yaml", "yaml")
        assert exc_info.value.format_type == "yaml"
        assert "yaml" in str(exc_info.value)


class TestWriteDocument:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "settings.json"
        write_document(path, "json", {"k": "v"})
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_json_is_pretty_printed(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        write_document(path, "json", {"env": {"K": "ü"}})
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "env": {\n    "K": "ü"\n  }\n}\n'

    def test_toml_output(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        write_document(path, "toml", {"api": {"base_url": "u"}})
        doc = read_document(path, "toml")
        assert doc["api"]["base_url"] == "u"

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"old": true}', encoding="utf-8")
        write_document(path, "json", {"new": True})
        assert json.loads(path.read_text(encoding="utf-8")) == {"new": True}

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        write_document(path, "json", {"k": 1})
        write_document(path, "json", {"k": 2})
        assert sorted(p.name for p in tmp_path.iterdir()) == ["settings.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_keeps_existing_file_mode(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{}", encoding="utf-8")
        path.chmod(0o644)
        write_document(path, "json", {"k": 1})
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_unwritable_parent_raises_os_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("a regular file", encoding="utf-8")
        with pytest.raises(OSError):
            write_document(blocker / "settings.json", "json", {"k": 1})

    def test_unserializable_value_leaves_target_intact(
        self,
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"keep": 1}', encoding="utf-8")
        with pytest.raises(TypeError):
            write_document(path, "json", {"bad": object()})
        assert json.loads(path.read_text(encoding="utf-8")) == {"keep": 1}
        assert sorted(p.name for p in tmp_path.iterdir()) == ["settings.json"]

    def test_unsupported_format_raises(self, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFormat):
            write_document(tmp_path / "x.ini", "ini", {})


class TestGetCodec:
    def test_known_formats(self) -> None:
        assert get_codec("json").name == "json"
        assert get_codec("toml").name == "toml"

    def test_unknown_format(self) -> None:
        with pytest.raises(UnsupportedFormat):
            get_codec("yaml")
