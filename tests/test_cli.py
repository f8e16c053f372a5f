from typer.testing import CliRunner

from didyoumean.cli.main import app

runner = CliRunner()


def _word_list(tmp_path, words):
    p = tmp_path / "words.txt"
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return p


def test_suggest_clean_verbose_output(tmp_path):
    p = _word_list(tmp_path, ["hello", "help", "hell", "world"])
    res = runner.invoke(app, ["suggest", "helo", "--dictionary", str(p), "-d", "1", "-c", "-v"])
    assert res.exit_code == 0, res.output
    assert res.output.splitlines() == ["hell (edit distance: 1)", "hello (edit distance: 1)"]


def test_suggest_numbered_output(tmp_path):
    p = _word_list(tmp_path, ["hello", "help", "hell", "world"])
    res = runner.invoke(app, ["suggest", "helo", "--dictionary", str(p), "-d", "1"])
    assert res.exit_code == 0, res.output
    lines = res.output.splitlines()
    assert lines[0] == "Did you mean?"
    assert lines[1:] == ["1. hell", "2. hello"]


def test_suggest_reads_word_from_stdin(tmp_path):
    p = _word_list(tmp_path, ["cat", "bat", "rat"])
    res = runner.invoke(app, ["suggest", "--dictionary", str(p), "-c"], input="cst\n")
    assert res.exit_code == 0, res.output
    assert res.output.splitlines() == ["cat", "bat", "rat"]


def test_suggest_exact_and_no_match(tmp_path):
    p = _word_list(tmp_path, ["cat", "bat", "rat"])
    res = runner.invoke(app, ["suggest", "cat", "--dictionary", str(p)])
    assert res.exit_code == 0
    assert "spelled correctly" in res.output

    res = runner.invoke(app, ["suggest", "zzzzzz", "--dictionary", str(p), "-d", "1"])
    assert res.exit_code == 0
    assert "No suggestions within edit distance 1." in res.output


def test_suggest_empty_dictionary_fails(tmp_path):
    p = _word_list(tmp_path, ["", "  "])
    res = runner.invoke(app, ["suggest", "cat", "--dictionary", str(p)])
    assert res.exit_code == 1


def test_suggest_missing_language(tmp_path, monkeypatch):
    monkeypatch.setenv("DIDYOUMEAN_DATA_DIR", str(tmp_path))
    res = runner.invoke(app, ["suggest", "cat", "--lang", "xx"])
    assert res.exit_code == 1


def test_distance_command():
    res = runner.invoke(app, ["distance", "sitting", "kitten"])
    assert res.exit_code == 0
    assert res.output.strip() == "3"
    res = runner.invoke(app, ["distance", "sitting", "kitten", "--bound", "2"])
    assert res.output.strip() == "exceeds bound 2"


def test_langs_command(tmp_path, monkeypatch):
    monkeypatch.setenv("DIDYOUMEAN_DATA_DIR", str(tmp_path))
    (tmp_path / "en").write_text("a\n", encoding="utf-8")
    res = runner.invoke(app, ["langs"])
    assert res.exit_code == 0
    assert " - en" in res.output
