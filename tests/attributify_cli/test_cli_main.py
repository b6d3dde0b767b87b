"""Tests for the attributify CLI."""

import io
import json

import pytest

from attributify_cli.main import build_parser, main


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def write_project_config(project_path, text):
    config_dir = project_path / ".attributify"
    config_dir.mkdir(exist_ok=True)
    (config_dir / "attributify.yaml").write_text(text, encoding="utf-8")


class TestParser:

    def test_verb_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_extract_args(self):
        args = build_parser().parse_args(["extract", "a.html", "b.vue", "--macro"])
        assert args.paths == ["a.html", "b.vue"]
        assert args.macro is True
        assert args.detect_macro is None


class TestExtractVerb:
    """attributify extract <paths...>"""

    def test_extract_file(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text('<div class="p-2 m-1" data-state="open">', encoding="utf-8")

        code, out, _ = run(capsys, "-p", str(tmp_path), "extract", str(page))

        assert code == 0
        result = json.loads(out)
        assert result["success"] is True
        assert result["data"] == {str(page): ["[data-state~=\"open\"]", "m-1", "p-2"]}
        assert result["metadata"] == {"total": 3}

    def test_total_counts_unique_selectors(self, tmp_path, capsys):
        first = tmp_path / "a.html"
        second = tmp_path / "b.html"
        first.write_text('<div class="p-2">', encoding="utf-8")
        second.write_text('<div class="p-2 m-1">', encoding="utf-8")

        _, out, _ = run(capsys, "-p", str(tmp_path), "extract", str(first), str(second), "--compact")

        assert json.loads(out)["metadata"] == {"total": 2}
        assert "\n" not in out.strip()

    def test_macro_flag(self, tmp_path, capsys):
        source = tmp_path / "app.rs"
        source.write_text('rsx!(\n    div {\n        "class": "flex",\n    }\n)\n', encoding="utf-8")

        _, plain, _ = run(capsys, "-p", str(tmp_path), "extract", str(source))
        _, forced, _ = run(capsys, "-p", str(tmp_path), "extract", str(source), "--macro")

        assert json.loads(plain)["data"] == {str(source): []}
        assert json.loads(forced)["data"] == {str(source): ["flex"]}

    def test_project_config_applies(self, tmp_path, capsys):
        write_project_config(tmp_path, "true_to_non_valued: true\n")
        page = tmp_path / "page.html"
        page.write_text("<input disabled>", encoding="utf-8")

        _, out, _ = run(capsys, "-p", str(tmp_path), "extract", str(page))

        assert json.loads(out)["data"][str(page)] == ['[disabled=""]', '[disabled="true"]']

    def test_stdin(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('<a class="x">'))

        _, out, _ = run(capsys, "-p", str(tmp_path), "extract", "-")

        assert json.loads(out)["data"] == {"-": ["x"]}

    def test_missing_file(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text('<a class="x">', encoding="utf-8")
        missing = tmp_path / "missing.html"

        code, out, err = run(capsys, "-p", str(tmp_path), "extract", str(missing), str(page))

        assert code == 1
        assert "cannot read" in err
        assert json.loads(out)["data"] == {str(page): ["x"]}

    def test_bad_config(self, tmp_path, capsys):
        write_project_config(tmp_path, "macro_parsing: sometimes\n")
        page = tmp_path / "page.html"
        page.write_text("<a b>", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["-p", str(tmp_path), "extract", str(page)])

        assert exc_info.value.code == 1
        assert "macro_parsing" in capsys.readouterr().err


class TestOptionsVerb:

    def test_defaults(self, tmp_path, capsys):
        code, out, _ = run(capsys, "-p", str(tmp_path), "options")

        assert code == 0
        data = json.loads(out)["data"]
        assert data["ignore_attributes"] == ["placeholder"]
        assert data["macro_name"] == "rsx"

    def test_project_override(self, tmp_path, capsys):
        write_project_config(tmp_path, "ignoreAttributes: [alt]\nprefixed_only: true\n")

        _, out, _ = run(capsys, "-p", str(tmp_path), "options", "--compact")

        data = json.loads(out)["data"]
        assert data["ignore_attributes"] == ["alt"]
        assert data["prefixed_only"] is True
