import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from digit_trie import DigitTrie


def test_words_for_exact_match_only():
    trie = DigitTrie.build(["any", "an", "Tor"])
    assert trie.words_for("059") == ("any",)
    assert trie.words_for("05") == ("an",)
    assert trie.words_for("0") == ()
    assert trie.words_for("0594") == ()
    assert trie.words_for("266") == ("Tor",)


def test_words_keep_original_text_and_order():
    trie = DigitTrie.build(['d"ug', "duo", "Duo"])
    assert trie.words_for("336") == ('d"ug', "duo", "Duo")


def test_duplicates_and_letterless_words_are_dropped():
    trie = DigitTrie.build(["ed", "ed", "", '"-', "  "])
    assert trie.words_for("53") == ("ed",)
    assert len(trie) == 1


def test_has_prefix():
    trie = DigitTrie.build(["mild"])
    assert trie.has_prefix("18")
    assert trie.has_prefix("1823")
    assert not trie.has_prefix("18234")
    assert not trie.has_prefix("2")


def test_empty_digits_match_nothing():
    trie = DigitTrie.build(["a"])
    assert trie.words_for("") == ()
