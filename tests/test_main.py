"""Tests for config loading and the command-line entry point."""

import json

import pytest

from src.main import load_config, main


@pytest.fixture
def config_file(tmp_path):
    """A fixed 2x2 board (C A / T S) with a small dictionary."""
    words = tmp_path / "words.txt"
    words.write_text("cat\nact\nsat\ndog\n")
    path = tmp_path / "board.yaml"
    path.write_text(
        "rows: 2\n"
        "cols: 2\n"
        f"dictionary: {words}\n"
        "dice:\n"
        "  - [C]\n"
        "  - [A]\n"
        "  - [T]\n"
        "  - [S]\n"
    )
    return path


class TestLoadConfig:
    """Test cases for YAML configuration."""

    def test_load(self, config_file):
        config = load_config(str(config_file))
        assert config.rows == 2
        assert config.dice == [["C"], ["A"], ["T"], ["S"]]
        assert config.seed is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(str(path))
        assert config.rows == 4
        assert len(config.dice) == 16

    def test_invalid_dice(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("rows: 1\ncols: 2\ndice:\n  - [A]\n  - []\n")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestMain:
    """Test cases for the CLI."""

    def test_checks_words(self, config_file, capsys):
        code = main([str(config_file), "-w", "cat", "-w", "dog", "-w", "cat", "-w", "sat"])
        out = capsys.readouterr().out

        assert code == 0
        assert "C A\nT S" in out
        assert "CAT          valid   +1  (0,0) (0,1) (1,0)" in out
        assert "DOG          invalid (NOT_ON_BOARD)" in out
        assert "CAT          invalid (ALREADY_FOUND)" in out
        assert "Words found: CAT, SAT" in out
        assert "Score: 2" in out

    def test_writes_output(self, config_file, tmp_path, capsys):
        output = tmp_path / "out" / "state.json"
        code = main([str(config_file), "-w", "act", "--output", str(output)])

        assert code == 0
        state = json.loads(output.read_text())
        assert state["board"] == [["C", "A"], ["T", "S"]]
        assert state["found_words"] == ["ACT"]
        assert state["score"] == 1

    def test_missing_config(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.yaml")])
        assert exc.value.code == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_missing_dictionary(self, config_file, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(config_file), "--dictionary", str(tmp_path / "missing.txt")])
        assert exc.value.code == 1
        assert "Error creating game" in capsys.readouterr().err

    def test_verbose(self, config_file, capsys):
        main([str(config_file), "--seed", "3", "--verbose"])
        out = capsys.readouterr().out
        assert "(4 words)" in out
        assert "Seed: 3" in out
