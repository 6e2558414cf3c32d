"""Tests for the lingssg command line."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from lingssg.cli._dispatcher import build_parser, discover_domains, main


class TestDispatcher:
    def test_discovers_domains(self) -> None:
        assert set(discover_domains()) == {"config", "site", "transcode"}

    def test_no_arguments_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        assert "transcode" in capsys.readouterr().out

    def test_domain_without_command_prints_domain_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode"]) == 0
        out = capsys.readouterr().out
        assert "encode" in out and "decode" in out

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--version"])
        assert excinfo.value.code == 0
        assert "lingssg 0.1.0" in capsys.readouterr().out


class TestTranscode:
    def test_encode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "encode", "h{e}l.o{U} {4}{2}{3}{2}"]) == 0
        assert capsys.readouterr().out == "hɛl.oʊ ˦˨˧˨\n"

    def test_encode_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "encode", "{e}", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"input": "{e}", "output": "ɛ"}

    def test_encode_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "encode", "{zz}", "--json"]) == 1
        payload = json.loads(capsys.readouterr().err)
        assert payload["error"] == "encode_error"
        assert payload["message"] == "Unknown code zz"
        assert payload["details"]["code"] == "UnknownCode"

    def test_encode_error_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "encode", "h{e"]) == 1
        assert capsys.readouterr().err == "Error: Unmatched '{'\n"

    def test_encode_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "in.txt"
        source.write_text("{th}", encoding="utf-8")
        assert main(["transcode", "encode", "--file", str(source)]) == 0
        assert capsys.readouterr().out == "θ\n"

    def test_encode_file_with_invalid_utf8(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "in.txt"
        source.write_bytes(b"h{e}\xff")
        assert main(["transcode", "encode", "--file", str(source)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert "can't decode byte 0xff" in err

    def test_decode_file_with_invalid_utf8_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "in.txt"
        source.write_bytes(b"\xff")
        assert main(["transcode", "decode", "--file", str(source), "--json"]) == 1
        assert json.loads(capsys.readouterr().err)["error"] == "decode_error"

    def test_encode_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("{o}"))
        assert main(["transcode", "encode"]) == 0
        assert capsys.readouterr().out == "ɔ\n"

    def test_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "decode", "hɛl.oʊ"]) == 0
        assert capsys.readouterr().out == "hel.oU\n"

    def test_table_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "table", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert {"code": "e", "char": "ɛ"} in payload["entries"]
        assert payload["max_code_len"] == 3

    def test_table_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["transcode", "table"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert any(line.startswith("{e}") and line.endswith("ɛ") for line in lines)


class TestSite:
    def test_build(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["site", "build", "--repo-root", str(project), "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["status"] == "success"
        assert (project / "public" / "index.html").exists()

    def test_build_error(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (project / "pages" / "bad.md").write_text("no terminator\n", encoding="utf-8")
        assert main(["site", "build", "--repo-root", str(project)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Error in ")
        assert "caused by: Missing metadata terminator line +++" in err

    def test_unknown_pack(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg_dir = project / ".lingssg" / "config"
        cfg_dir.mkdir(parents=True)
        (cfg_dir / "packs.yaml").write_text("packs:\n  active: [nope]\n", encoding="utf-8")
        assert main(["site", "build", "--repo-root", str(project)]) == 1
        assert "Unknown pack nope" in capsys.readouterr().err

    def test_functions(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["site", "functions", "--repo-root", str(project)]) == 0
        assert capsys.readouterr().out == "transc\n"

    def test_function_doc(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["site", "functions", "transc", "--repo-root", str(project)]) == 0
        assert "att:bool?" in capsys.readouterr().out

    def test_unknown_function(self, project: Path) -> None:
        assert main(["site", "functions", "nope", "--repo-root", str(project)]) == 1


class TestConfigShow:
    def test_show_key_as_yaml(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["config", "show", "site.output_dir", "--repo-root", str(tmp_path)]) == 0
        assert capsys.readouterr().out == "site:\n  output_dir: public\n"

    def test_show_all_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["config", "show", "--json", "--repo-root", str(tmp_path)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["packs"]["active"] == ["linguistics"]

    def test_missing_key(self, tmp_path: Path) -> None:
        assert main(["config", "show", "site.nope", "--repo-root", str(tmp_path)]) == 1

    def test_null_valued_key_is_shown(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config_dir = tmp_path / ".lingssg" / "config"
        config_dir.mkdir(parents=True)
        (config_dir / "notes.yaml").write_text("notes:\n  draft: null\n", encoding="utf-8")
        assert main(["config", "show", "notes.draft", "--json", "--repo-root", str(tmp_path)]) == 0
        assert json.loads(capsys.readouterr().out) == {"notes": {"draft": None}}
