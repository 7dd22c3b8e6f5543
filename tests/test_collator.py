"""Tests for the string collator."""

import pytest

from record_cache.application.services.collator import (
    Collator,
    tidy,
    transliterate_char,
)


class TestTransliteration:
    """Test cases for character transliteration."""
    
    @pytest.mark.parametrize("char,expected", [
        ("a", "a"),
        ("?", "?"),
        ("é", "e"),
        ("Ñ", "N"),
        ("ß", "ss"),
        ("Æ", "AE"),
        ("ø", "o"),
        ("ł", "l"),
    ])
    def test_known_characters(self, char, expected):
        assert transliterate_char(char) == expected
    
    def test_unknown_character_has_no_ascii_form(self):
        assert transliterate_char("日") is None
        assert transliterate_char("\u0301") is None


class TestTidy:
    """Test cases for malformed input repair."""
    
    def test_valid_utf8_bytes(self):
        assert tidy("café".encode("utf-8")) == "café"
    
    def test_invalid_utf8_bytes_fall_back_to_cp1252(self):
        assert tidy(b"caf\xe9") == "café"
    
    def test_lone_surrogate_replaced(self):
        assert tidy("a\udc80b") == "a\ufffdb"
    
    def test_well_formed_string_unchanged(self):
        assert tidy("Straße") == "Straße"


class TestCollator:
    """Test cases for collation keys."""
    
    def test_case_folding(self):
        collator = Collator()
        assert collator.collate("APPLE") == "apple"
    
    def test_accents_removed(self):
        collator = Collator()
        assert collator.collate("Élan") == "elan"
        assert collator.collate("crème brûlée") == "creme brulee"
    
    def test_accent_and_case_variants_share_a_key(self):
        collator = Collator()
        assert collator.collate("Éclair") == collator.collate("eclair") == collator.collate("ECLAIR")
    
    def test_multi_letter_approximation(self):
        assert Collator().collate("Straße") == "strasse"
    
    def test_untransliterable_characters_restored(self):
        assert Collator().collate("日本 Tea") == "日本 tea"
    
    def test_literal_question_mark_kept(self):
        assert Collator().collate("Why?") == "why?"
    
    def test_letters_case_fold_next_to_untransliterable_characters(self):
        collator = Collator()
        assert collator.collate("Xylo 日") == collator.collate("xylo 日") == "xylo 日"
        assert collator.collate("日X") == "日x"
    
    def test_normalization_form_is_configurable(self):
        assert Collator(normalization_form="NFD").collate("\u00e9") == "e\u0301"
        assert Collator(normalization_form="NFC").collate("e\u0301") == "e"
    
    def test_compatibility_characters(self):
        assert Collator().collate("Ｈｅｌｌｏ") == "hello"
    
    def test_decomposed_input_normalized(self):
        assert Collator().collate("e\u0301") == Collator().collate("\u00e9") == "e"
    
    def test_bytes_are_collated(self):
        assert Collator().collate(b"Caf\xe9") == "cafe"
    
    def test_none_and_non_strings_pass_through(self):
        collator = Collator()
        assert collator.collate(None) is None
        assert collator.collate(5) == 5
        assert len(collator) == 0
    
    def test_keys_cached_until_cleared(self):
        collator = Collator()
        collator.collate("Apple")
        collator.collate("Apple")
        collator.collate("Pear")
        
        assert len(collator) == 2
        assert "Apple" in collator
        
        collator.clear()
        
        assert len(collator) == 0
        assert "Apple" not in collator
    
    def test_instances_do_not_share_keys(self):
        first = Collator()
        second = Collator()
        first.collate("Apple")
        
        assert "Apple" not in second
