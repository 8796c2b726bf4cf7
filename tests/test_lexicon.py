from pathlib import Path

import _bootstrap  # noqa: F401

from verse_assistant import lexicon as lexicon_module
from verse_assistant.lexicon import Lexicon, default_wordlist_path, load_wordlist, parse_wordlist
from verse_assistant.matchers import find_rhyming_words


def test_parse_wordlist_normalizes_and_drops_short_words():
    assert parse_wordlist("Cat  BAT\n\ta dog\nI  ox") == ("cat", "bat", "dog", "ox")


def test_load_wordlist_reads_file(wordlist_file):
    words = load_wordlist(wordlist_file)
    assert words[:3] == ("cat", "bat", "hat")
    assert "x" not in words
    assert words[-1] == "moon"


def test_load_wordlist_tolerates_bad_bytes(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat caf\xe9\ndog\n")
    words = load_wordlist(path)
    assert words[0] == "cat"
    assert words[-1] == "dog"


def test_missing_wordlist_gives_empty_lexicon(tmp_path, caplog):
    words = load_wordlist(tmp_path / "missing.txt")
    assert words == ()
    assert "Failed to load wordlist" in caplog.text
    assert find_rhyming_words("cat", words) == []


def test_lexicon_load_failure_leaves_it_empty():
    def broken():
        raise RuntimeError("network down")

    lexicon = Lexicon()
    lexicon.load(broken)
    assert not lexicon.available
    assert lexicon.words == ()


def test_lexicon_background_load(wordlist_file):
    lexicon = Lexicon()
    assert len(lexicon) == 0
    thread = lexicon.load_in_background(lambda: load_wordlist(wordlist_file))
    assert thread.daemon
    assert lexicon.wait(timeout=5)
    assert lexicon.available
    assert "bat" in find_rhyming_words("cat", lexicon)


def test_load_nltk_words_uses_corpus(monkeypatch):
    monkeypatch.setattr(lexicon_module, "ensure_nltk_words", lambda: None)

    class FakeCorpus:
        @staticmethod
        def words():
            return ["Aardvark", "a", "Zebra"]

    import nltk.corpus

    monkeypatch.setattr(nltk.corpus, "words", FakeCorpus, raising=False)
    assert lexicon_module.load_nltk_words() == ("aardvark", "zebra")


def test_load_nltk_words_failure_is_empty(monkeypatch):
    def missing():
        raise LookupError("words corpus not found")

    monkeypatch.setattr(lexicon_module, "ensure_nltk_words", missing)
    assert lexicon_module.load_nltk_words() == ()


def test_default_wordlist_path_prefers_env_override(monkeypatch, tmp_path):
    env_path = tmp_path / "custom.txt"
    monkeypatch.setenv("VERSE_ASSISTANT_WORDLIST", str(env_path))
    assert default_wordlist_path() == env_path


def test_default_wordlist_path_prefers_local_file(monkeypatch, tmp_path):
    monkeypatch.delenv("VERSE_ASSISTANT_WORDLIST", raising=False)
    monkeypatch.chdir(tmp_path)
    local = tmp_path / "wordlist.txt"
    local.write_text("cat\n")
    assert default_wordlist_path() == local


def test_default_wordlist_path_uses_xdg_data_home(monkeypatch, tmp_path):
    monkeypatch.delenv("VERSE_ASSISTANT_WORDLIST", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    expected = tmp_path / "xdg" / "verse_assistant" / "wordlist.txt"
    assert default_wordlist_path() == expected


def test_default_wordlist_path_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("VERSE_ASSISTANT_WORDLIST", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    home_dir = tmp_path / "home"
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home_dir))
    expected = home_dir / ".local" / "share" / "verse_assistant" / "wordlist.txt"
    assert default_wordlist_path() == expected
