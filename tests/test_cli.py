import pytest
from typer.testing import CliRunner
from wordscramble.cli import app

runner = CliRunner()

@pytest.fixture
def game_files(tmp_path):
    start = tmp_path / "start.txt"
    start.write_text("garden\n", encoding="utf-8")
    words = tmp_path / "words.txt"
    words.write_text("dean\nrange\nred\n", encoding="utf-8")
    return start, words

def test_play_round(game_files):
    start, words = game_files
    result = runner.invoke(
        app,
        ["play", "--word-list", str(start), "--dictionary", "wordlist", "--dictionary-path", str(words)],
        input="dean\n DEAN \nzzz\nnerd\n\nrange\n:quit\n"
    )
    assert result.exit_code == 0, result.output
    assert "Root word: garden" in result.output
    assert "Score: 4" in result.output
    assert "Word used already" in result.output
    assert "You can't spell that word from 'garden'!" in result.output
    assert "Word not recognized" in result.output
    assert "Score: 9" in result.output
    assert "Final score: 9 (2 words)" in result.output

def test_play_new_round_resets_score(game_files):
    start, words = game_files
    result = runner.invoke(
        app,
        ["play", "--word-list", str(start), "--dictionary", "wordlist", "--dictionary-path", str(words)],
        input="dean\n:new\n"
    )
    assert result.exit_code == 0, result.output
    assert "Final score: 0 (0 words)" in result.output

def test_play_missing_word_list_is_fatal(tmp_path, game_files):
    _, words = game_files
    result = runner.invoke(
        app,
        ["play", "--word-list", str(tmp_path / "nope.txt"), "--dictionary", "wordlist", "--dictionary-path", str(words)]
    )
    assert result.exit_code == 1
    assert "Could not load" in result.output

def test_play_unknown_provider():
    result = runner.invoke(app, ["play", "--dictionary", "spellcheck"])
    assert result.exit_code == 1
    assert "Unknown dictionary provider" in result.output

def test_check():
    result = runner.invoke(app, ["check", "aabb", "AB"])
    assert result.exit_code == 0
    assert "'ab' can be spelled from 'aabb'" in result.output

    result = runner.invoke(app, ["check", "aabb", "aaabb"])
    assert result.exit_code == 1
    assert "cannot be spelled" in result.output
