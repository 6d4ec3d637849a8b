"""
Tests for the command line interface.
"""
from __future__ import annotations

import io

import pytest

from riprocess.alignment import Image
from riprocess.cli import format_image, main


class TestFormatImage:
    """Tests for format_image."""

    def test_six_decimals(self, tmp_path):
        path = tmp_path / "DSC03522.JPG"
        assert format_image(Image(path, 332979.8994409999)) == f"332979.899441;{path}"

    def test_relative_path(self):
        from pathlib import Path

        assert format_image(Image(Path("images/DSC03522.JPG"), 1.0)) == "1.000000;images/DSC03522.JPG"


class TestMain:
    """Tests for main."""

    def test_image_list(self, config_file, image_dir):
        """One line per pair, in order."""
        out = io.StringIO()
        assert main(["image-list", str(config_file)], out=out) == 0
        assert out.getvalue().splitlines() == [
            f"332979.899441;{image_dir / 'DSC03522.JPG'}",
            f"332981.419326;{image_dir / 'DSC03523.JPG'}",
            f"333040.399224;{image_dir / 'DSC03524.JPG'}",
            f"333042.018970;{image_dir / 'DSC03525.JPG'}",
        ]

    def test_stdout_default(self, config_file, capsys):
        assert main(["image-list", str(config_file)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 4

    def test_failure_writes_no_output(self, config_file, capsys):
        """A count mismatch exits 1 with a message and no partial list."""
        text = config_file.read_text(encoding="utf-8").replace("last_image_number = 3525\n", "")
        config_file.write_text(text, encoding="utf-8")
        out = io.StringIO()
        assert main(["image-list", str(config_file)], out=out) == 1
        assert out.getvalue() == ""
        err = capsys.readouterr().err
        assert "riprocess: error: timestamp count mismatch" in err

    def test_missing_config(self, tmp_path, capsys):
        """A missing configuration file exits 1."""
        assert main(["image-list", str(tmp_path / "missing.toml")], out=io.StringIO()) == 1
        assert "riprocess: error:" in capsys.readouterr().err

    def test_verbose_logs_to_stderr(self, config_file, capsys):
        out = io.StringIO()
        assert main(["--verbose", "image-list", str(config_file)], out=out) == 0
        captured = capsys.readouterr()
        assert "riprocess.alignment.pairing" in captured.err
        assert captured.out == ""

    def test_verbose_after_subcommand(self, config_file, capsys):
        """The flag is also accepted after the subcommand."""
        out = io.StringIO()
        assert main(["image-list", str(config_file), "-v"], out=out) == 0
        assert len(out.getvalue().splitlines()) == 4
        assert "riprocess.alignment.pairing" in capsys.readouterr().err

    def test_not_verbose_by_default(self, config_file, capsys):
        assert main(["image-list", str(config_file)], out=io.StringIO()) == 0
        assert capsys.readouterr().err == ""

    def test_invalid_utf8_timestamp_file(self, config_file, timestamp_dir, capsys):
        """Undecodable timestamp files exit 1 with a message."""
        (timestamp_dir / "170621_202939.eif").write_bytes(b"73779.899441\n\xff\n")
        out = io.StringIO()
        assert main(["image-list", str(config_file)], out=out) == 1
        assert out.getvalue() == ""
        assert "riprocess: error:" in capsys.readouterr().err

    def test_invalid_utf8_config(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_bytes(b"\xff\xfe")
        assert main(["image-list", str(path)], out=io.StringIO()) == 1
        assert "riprocess: error:" in capsys.readouterr().err

    def test_missing_command(self):
        """argparse rejects a missing subcommand with status 2."""
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_missing_config_argument(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["image-list"])
        assert excinfo.value.code == 2
