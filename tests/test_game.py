"""Tests for the Boggle game facade, scoring and configuration."""

import pytest

from src.engine import Board, Boggle, BoggleConfig, STANDARD_DICE, score_word
from src.lexicon import Lexicon


@pytest.fixture
def game():
    board = Board.from_labels([
        ["C", "A", "T", "S"],
        ["X", "X", "E", "X"],
        ["X", "X", "A", "X"],
        ["X", "X", "X", "X"],
    ])
    lexicon = Lexicon(["cat", "cats", "tea", "seat", "act"])
    return Boggle(board=board, lexicon=lexicon)


class TestScoring:
    """Test cases for word points."""

    def test_short_words_score_nothing(self):
        assert score_word("") == 0
        assert score_word("AB") == 0

    def test_point_table(self):
        assert score_word("CAT") == 1
        assert score_word("CATS") == 1
        assert score_word("QUITE") == 2
        assert score_word("STREAM") == 3
        assert score_word("DRASTIC") == 5
        assert score_word("TEAMAKER") == 11
        assert score_word("ZYGOSITY") == 11


class TestCreate:
    """Test cases for building games."""

    def test_number_of_dice(self):
        assert Boggle.NUMBER_OF_DICE == 16

    def test_default_game(self):
        game = Boggle.create()
        assert len(game.get_dice()) == 16
        assert game.lexicon.size() > 1000

    def test_config_seed_reproducible(self):
        lexicon = Lexicon(["cat"])
        a = Boggle.create(BoggleConfig(seed=5), lexicon=lexicon)
        b = Boggle.create(BoggleConfig(seed=5), lexicon=lexicon)
        assert a.board.snapshot() == b.board.snapshot()

    def test_config_dictionary(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\n")
        game = Boggle.create(BoggleConfig(dictionary=str(path)))
        assert game.lexicon.size() == 2

    def test_missing_dictionary_is_fatal(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Boggle.create(BoggleConfig(dictionary=str(tmp_path / "missing.txt")))

    def test_config_dice_must_fill_board(self):
        with pytest.raises(ValueError):
            BoggleConfig(rows=4, cols=4, dice=STANDARD_DICE[:10])

    def test_config_empty_die(self):
        with pytest.raises(ValueError):
            BoggleConfig(rows=1, cols=2, dice=[["A"], []])

    def test_config_defaults_to_standard_dice(self):
        assert BoggleConfig().dice == STANDARD_DICE


class TestPlay:
    """Test cases for submitting words."""

    def test_is_a_boggle_word(self, game):
        assert game.is_a_boggle_word("cat") is True
        assert game.is_a_boggle_word("act") is False

    def test_submit_records_valid_word(self, game):
        result = game.submit("cats")
        assert result.valid is True
        assert result.points == 1
        assert game.found_words == ["CATS"]
        assert game.score == 1

    def test_submit_rejects_repeat(self, game):
        game.submit("cat")
        result = game.submit("CAT")
        assert result.valid is False
        assert result.reason == "ALREADY_FOUND"
        assert game.found_words == ["CAT"]

    def test_submit_invalid_not_recorded(self, game):
        result = game.submit("act")
        assert result.valid is False
        assert result.reason == "NOT_ON_BOARD"
        assert game.found_words == []
        assert game.score == 0

    def test_score_accumulates(self, game):
        for word in ("cat", "cats", "tea", "seat"):
            assert game.submit(word).valid is True
        assert game.found_words == ["CAT", "CATS", "SEAT", "TEA"]
        assert game.score == 4

    def test_check_does_not_record(self, game):
        assert game.check("cat").valid is True
        assert game.found_words == []

    def test_shuffle_starts_new_round(self, game):
        game.submit("cat")
        game.shuffle_and_roll()
        assert game.found_words == []
        assert game.score == 0

    def test_get_state(self, game):
        game.submit("tea")
        state = game.get_state()
        assert state["rows"] == 4
        assert state["cols"] == 4
        assert state["board"][0] == ["C", "A", "T", "S"]
        assert state["found_words"] == ["TEA"]
        assert state["score"] == 1
