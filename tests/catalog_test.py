from fallingwords.difficulty import DIFFICULTY_PROFILES, get_profile
from fallingwords.words import ALL_THEME, CATEGORIES, WORD_CATALOG, build_catalog, theme_names, words_for


def test_all_theme_is_union_with_duplicates():
    total = sum(len(words) for words in CATEGORIES.values())
    assert len(WORD_CATALOG[ALL_THEME]) == total
    assert WORD_CATALOG[ALL_THEME].count("volcano") == 2
    assert WORD_CATALOG[ALL_THEME].count("actor") == 2


def test_all_theme_listed_first():
    names = theme_names()
    assert names[0] == ALL_THEME
    assert "animals" in names and "jobs" in names
    assert len(names) == len(CATEGORIES) + 1


def test_build_catalog_copies_lists():
    source = {"pets": ["cat"]}
    catalog = build_catalog(source)
    catalog["pets"].append("dog")
    assert source["pets"] == ["cat"]
    assert catalog[ALL_THEME] == ["cat"]


def test_words_for_unknown_theme_falls_back_to_all():
    assert words_for("nope") is WORD_CATALOG[ALL_THEME]
    assert words_for("food") == CATEGORIES["food"]


def test_words_for_empty_catalog():
    assert words_for("anything", {}) == []


def test_difficulty_profiles():
    assert (DIFFICULTY_PROFILES["easy"].spawn_ms, DIFFICULTY_PROFILES["easy"].base_speed) == (2000, 60)
    assert (DIFFICULTY_PROFILES["medium"].spawn_ms, DIFFICULTY_PROFILES["medium"].base_speed) == (1400, 110)
    assert (DIFFICULTY_PROFILES["hard"].spawn_ms, DIFFICULTY_PROFILES["hard"].base_speed) == (900, 170)


def test_unknown_difficulty_falls_back_to_easy():
    assert get_profile("insane") is DIFFICULTY_PROFILES["easy"]
