"""Tests for the command-line entry point."""

import io
import json

import pytest

from cardslug.cli import EXIT_BAD_DICTIONARIES, EXIT_OK, main, run
from cardslug.services.dictionaries import build_dictionaries


class TestMain:
    def test_positional_slugs(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["c90a-ari-austin-riley", "cl-5"])

        assert exit_code == EXIT_OK
        out = capsys.readouterr().out
        assert out.splitlines() == ["C90A-ARI\taustin-riley", "CL-5\t"]

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--json", "102-freddie-freeman"])

        line = capsys.readouterr().out.strip()
        assert json.loads(line) == {
            "slug": "102-freddie-freeman",
            "cardNumber": "102",
            "playerSlug": "freddie-freeman",
        }

    def test_reads_stdin_and_skips_blank_lines(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("i-1-mike-trout\n\n  checklist  \n"))

        main([])

        assert capsys.readouterr().out.splitlines() == ["I-1\tmike-trout", "CHECKLIST\t"]

    def test_dictionary_file(self, dictionary_file, capsys: pytest.CaptureFixture[str]) -> None:
        path = dictionary_file({"first_names": ["bobby"]})

        main(["--dictionaries", str(path), "sp-rc-101-bobby-witt-jr"])

        assert capsys.readouterr().out.strip() == "SP-RC-101\tbobby-witt-jr"

    def test_bad_dictionary_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--dictionaries", str(tmp_path / "missing.json"), "cl-5"])

        assert exit_code == EXIT_BAD_DICTIONARIES
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert captured.out == ""


    def test_directory_as_dictionary_file(
        self, tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(["--dictionaries", str(tmp_path), "cl-5"])

        assert exit_code == EXIT_BAD_DICTIONARIES
        assert "cannot read file" in capsys.readouterr().err

    def test_undecodable_dictionary_file(
        self, tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"first_names": ["\xff"]}')

        exit_code = main(["--dictionaries", str(path), "cl-5"])

        assert exit_code == EXIT_BAD_DICTIONARIES
        assert "not valid UTF-8" in capsys.readouterr().err


class TestRun:
    def test_returns_count(self) -> None:
        output = io.StringIO()

        count = run(["cl-5", "checklist"], build_dictionaries(), output)

        assert count == 2
        assert output.getvalue() == "CL-5\t\nCHECKLIST\t\n"
