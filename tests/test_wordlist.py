import pytest

from subsweep.errors import WordlistError
from subsweep.utils.wordlist import build_candidates, load_wordlist


def test_load_wordlist_skips_blank_and_comment_lines(write_wordlist):
    path = write_wordlist("# common prefixes", "www", "", "   ", "  mail  ", "#api", "dev")
    assert load_wordlist(path) == ["www", "mail", "dev"]


def test_load_wordlist_single_valid_line(write_wordlist):
    assert load_wordlist(write_wordlist("www")) == ["www"]


def test_load_wordlist_keeps_duplicates(write_wordlist):
    assert load_wordlist(write_wordlist("www", "www")) == ["www", "www"]


@pytest.mark.parametrize("lines", [(), ("",), ("# only", "   # indented comment", "")])
def test_load_wordlist_rejects_files_without_entries(write_wordlist, lines):
    with pytest.raises(WordlistError, match="empty"):
        load_wordlist(write_wordlist(*lines))


def test_load_wordlist_missing_file(tmp_path):
    with pytest.raises(WordlistError, match="not found"):
        load_wordlist(str(tmp_path / "nope.txt"))


def test_build_candidates():
    assert build_candidates(["www", "mail"], "example.com") == ["www.example.com", "mail.example.com"]
