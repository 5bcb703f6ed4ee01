"""Tests for the harpconv command line."""

import io
import json

import pytest

from harp_converter.cli import build_parser, main


class TestConvertCommand:
    """Tests for ``harpconv convert``."""

    def test_convert_file(self, tmp_path, capsys) -> None:
        """Converted tab is printed to stdout."""
        tab = tmp_path / "song.txt"
        tab.write_text("+4 -4\n+5 -5\n")
        assert main(["convert", str(tab), "--from", "diatonic"]) == 0
        out = capsys.readouterr().out
        assert out == "9 10\n11 12\n\n"

    def test_warnings_on_stderr(self, tmp_path, capsys) -> None:
        """Warnings go to stderr and do not fail the command."""
        tab = tmp_path / "song.txt"
        tab.write_text("-2 +4")
        assert main(["convert", str(tab), "--from", "diatonic"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "[-2] 9\n"
        assert "warning: Note G4 (draw) from -2 not available on tremolo harmonica" in captured.err

    def test_errors_exit_nonzero(self, tmp_path, capsys) -> None:
        """Conversion errors produce exit code 1."""
        tab = tmp_path / "song.txt"
        tab.write_text("+99")
        assert main(["convert", str(tab), "--from", "diatonic"]) == 1
        assert "error: Invalid diatonic hole: 99" in capsys.readouterr().err

    def test_json_output(self, tmp_path, capsys) -> None:
        """--json emits the full result."""
        tab = tmp_path / "song.txt"
        tab.write_text("9 1")
        assert main(["convert", str(tab), "--from", "tremolo", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert data["convertedTab"] == "+4 [1]"
        assert data["errors"] == []
        assert len(data["warnings"]) == 1

    def test_stdin(self, monkeypatch, capsys) -> None:
        """A dash reads the tab from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("9 11 13"))
        assert main(["convert", "-", "--from", "tremolo"]) == 0
        assert capsys.readouterr().out == "+4 +5 +6\n"

    def test_output_file(self, tmp_path, capsys) -> None:
        """-o writes the result to a file instead of stdout."""
        tab = tmp_path / "song.txt"
        tab.write_text("+4")
        out_path = tmp_path / "out.txt"
        assert main(["convert", str(tab), "--from", "diatonic", "-o", str(out_path)]) == 0
        assert out_path.read_text() == "9\n"
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, capsys) -> None:
        """Unreadable input reports an error."""
        assert main(["convert", str(tmp_path / "nope.txt"), "--from", "diatonic"]) == 1
        assert "Error: cannot read" in capsys.readouterr().err

    def test_non_utf8_input(self, tmp_path, capsys) -> None:
        """Undecodable input reports an error instead of a traceback."""
        tab = tmp_path / "song.txt"
        tab.write_bytes(b"+4 \xff\xfe -4\n")
        assert main(["convert", str(tab), "--from", "diatonic"]) == 1
        captured = capsys.readouterr()
        assert "Error: cannot read" in captured.err
        assert captured.out == ""

    def test_from_is_required(self) -> None:
        """--from must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["convert", "song.txt"])


class TestFindCommand:
    """Tests for ``harpconv find``."""

    def test_find_diatonic(self, capsys) -> None:
        assert main(["find", "A5"]) == 0
        assert capsys.readouterr().out == "A5: -6 (hole 6 draw)\n"

    def test_find_tremolo(self, capsys) -> None:
        assert main(["find", "C5", "--type", "tremolo"]) == 0
        assert capsys.readouterr().out == "C5: 9 (hole 9 blow)\n"

    def test_find_flat_in_key(self, capsys) -> None:
        """Bb4 is hole 1 blow on a Bb harmonica."""
        assert main(["find", "Bb4", "--key", "Bb"]) == 0
        assert capsys.readouterr().out == "A#4: +1 (hole 1 blow)\n"

    def test_find_unavailable(self, capsys) -> None:
        assert main(["find", "C#4"]) == 1
        assert "not available" in capsys.readouterr().err

    def test_find_invalid_note(self, capsys) -> None:
        assert main(["find", "X9"]) == 1
        assert "Invalid pitch" in capsys.readouterr().err

    def test_find_flat_across_octave(self, capsys) -> None:
        """Cb5 sounds as B4, which is hole 3 draw."""
        assert main(["find", "Cb5"]) == 0
        assert capsys.readouterr().out == "B4: -3 (hole 3 draw)\n"


class TestLayoutCommand:
    """Tests for ``harpconv layout``."""

    def test_diatonic_layout(self, capsys) -> None:
        assert main(["layout", "diatonic"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 10
        assert lines[0] == " 1  blow C4   draw D4"

    def test_tremolo_layout(self, capsys) -> None:
        assert main(["layout", "tremolo"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 24
        assert lines[8] == " 9  blow C5"

