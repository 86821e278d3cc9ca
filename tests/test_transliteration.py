import pytest

from voterlookup.search.transliteration import contains_malayalam, to_manglish, transliterate


@pytest.mark.parametrize(
    "native, expected",
    [
        ("രാജു", "raju"),
        ("രാജ", "raja"),
        ("പുന്നക്കൽ", "punnakkal"),
        ("എന്റെ", "ente"),
        ("കൃഷ്ണൻ", "krushnan"),
        ("അമ്മ", "amma"),
        ("തങ്കം", "thankam"),
        ("ചന്ദ്രൻ", "chandran"),
        ("ഉണ്ണി", "unni"),
        ("ശ്രീജ", "shrija"),
        ("മഠത്തിൽ", "mathatthil"),
    ],
)
def test_common_names(native, expected):
    assert transliterate(native) == expected


def test_is_deterministic():
    text = "പുന്നക്കൽ രാജു ൧൨"
    first = transliterate(text)
    assert all(transliterate(text) == first for _ in range(5))


@pytest.mark.parametrize("value", [None, "", "   ", "1234", "!?-/", "രാജു Kumar", "്", "ാാ", 42])
def test_never_raises(value):
    assert isinstance(transliterate(value), str)


def test_empty_and_none_give_empty_string():
    assert transliterate(None) == ""
    assert transliterate("") == ""


def test_passthrough_keeps_non_malayalam_in_order():
    assert transliterate("Raju-12, H/No 4!") == "Raju-12, H/No 4!"
    assert transliterate("രാജു Kumar 12") == "raju Kumar 12"


def test_virama_drops_inherent_vowel():
    assert transliterate("ക്ത") == "ktha"
    assert "ka" not in transliterate("ക്ത")
    assert transliterate("ക്ഷ") == "ksha"


def test_word_final_virama():
    assert transliterate("വീട്") == "vit"


def test_special_conjuncts():
    assert transliterate("റ്റ") == "tta"
    assert transliterate("ങ്ങൾ") == "ngal"
    assert transliterate("പഞ്ചായത്ത്") == "panchayatth"


def test_atomic_and_legacy_chillu_agree():
    atomic = transliterate("അവൻ")
    legacy = transliterate("\u0d05\u0d35\u0d28\u0d4d\u200d")
    assert atomic == legacy == "avan"


def test_atomic_and_legacy_nta_agree():
    assert transliterate("എന്റെ") == transliterate("എൻറെ") == "ente"


def test_decomposed_vowel_signs():
    precomposed = transliterate("\u0d15\u0d4a")
    decomposed = transliterate("\u0d15\u0d46\u0d3e")
    assert precomposed == decomposed == "ko"


def test_long_and_short_vowels_collapse():
    assert transliterate("ആ") == transliterate("അ") == "a"
    assert transliterate("കീ") == transliterate("കി") == "ki"
    assert transliterate("കൂ") == transliterate("കു") == "ku"


def test_malayalam_digits():
    assert transliterate("൧൨൩") == "123"


def test_anusvara_and_visarga():
    assert transliterate("ദുഃഖം") == "duhkham"


def test_to_manglish_lowercases():
    assert to_manglish("രാജു KUMAR") == "raju kumar"
    assert to_manglish(None) == ""


def test_contains_malayalam():
    assert contains_malayalam("raju രാജു")
    assert not contains_malayalam("raju")
    assert not contains_malayalam(None)
