"""Unit tests for the verified phrase dictionary."""

import json

import pytest

from linguabridge.translation.phrases import PhraseDictionary, get_phrase_dictionary, phrase_key


@pytest.fixture
def dictionary():
    return get_phrase_dictionary()


class TestBundledTables:
    """Test the tables shipped with the package."""

    def test_hello_english_to_hindi(self, dictionary):
        assert dictionary.lookup("hello", "en", "hi") == "नमस्ते"

    def test_case_insensitive(self, dictionary):
        assert dictionary.lookup("Good Morning", "en", "hi") == "शुभ प्रभात"
        assert dictionary.lookup("THANK YOU", "en", "hi") == "धन्यवाद"

    def test_whitespace_trimmed_and_collapsed(self, dictionary):
        assert dictionary.lookup("  how   are you ", "en", "hi") == "आप कैसे हैं?"
        assert dictionary.lookup("आप  कैसे  हैं", "hi", "en") == "How are you?"

    def test_hindi_to_english(self, dictionary):
        assert dictionary.lookup("नमस्ते", "hi", "en") == "Hello"
        assert dictionary.lookup("धन्यवाद", "hi", "en") == "Thank you"

    def test_exact_match_only(self, dictionary):
        assert dictionary.lookup("hello there", "en", "hi") is None
        assert dictionary.lookup("hell", "en", "hi") is None

    def test_directions_are_independent(self, dictionary):
        # "hi" is a key in en-hi only; hi-en has no entry for it
        assert dictionary.lookup("hi", "en", "hi") == "नमस्ते"
        assert dictionary.lookup("hi", "hi", "en") is None

    def test_unknown_direction(self, dictionary):
        assert dictionary.lookup("hello", "en", "ja") is None
        assert ("en", "ja") not in dictionary

    def test_directions(self, dictionary):
        directions = dictionary.directions()
        assert ("en", "hi") in directions
        assert ("hi", "en") in directions
        assert ("en", "es") in directions
        assert ("fr", "en") in directions

    def test_extra_directions(self, dictionary):
        assert dictionary.lookup("thank you", "en", "es") == "Gracias"
        assert dictionary.lookup("merci", "fr", "en") == "Thank you"

    def test_non_string_message(self, dictionary):
        assert dictionary.lookup(None, "en", "hi") is None

    def test_shared_instance(self):
        assert get_phrase_dictionary() is get_phrase_dictionary()


class TestCustomTables:
    """Test dictionaries built from explicit tables."""

    def test_in_memory_tables(self):
        dictionary = PhraseDictionary({("en", "de"): {"Good Night": "Gute Nacht"}})
        assert dictionary.lookup("good night", "en", "de") == "Gute Nacht"
        assert len(dictionary) == 1

    def test_tables_are_read_only(self):
        dictionary = PhraseDictionary({("en", "de"): {"yes": "Ja"}})
        with pytest.raises(TypeError):
            dictionary.phrases_for("en", "de")["no"] = "Nein"

    def test_source_tables_not_shared(self):
        source = {"yes": "Ja"}
        dictionary = PhraseDictionary({("en", "de"): source})
        source["no"] = "Nein"
        assert dictionary.lookup("no", "en", "de") is None

    def test_from_directory(self, tmp_path):
        (tmp_path / "en-ko.json").write_text(json.dumps({"thank you": "감사합니다"}), encoding="utf-8")
        (tmp_path / "notes.json").write_text("{}", encoding="utf-8")

        dictionary = PhraseDictionary.from_directory(tmp_path)

        assert dictionary.directions() == (("en", "ko"),)
        assert dictionary.lookup("Thank you", "en", "ko") == "감사합니다"


def test_phrase_key():
    assert phrase_key("  Hello   World ") == "hello world"
