import pytest

from seednames.core.catalog import (
    ADJECTIVES,
    DEFAULT_CATALOG,
    NOUNS,
    CatalogError,
    WordCatalog,
)

# ── Reference data ───────────────────────────────────────────

def test_default_catalog_sizes() -> None:
    assert DEFAULT_CATALOG.adjective_count() == 62
    assert DEFAULT_CATALOG.noun_count() == 58
    assert DEFAULT_CATALOG.combinations() == 3596

def test_default_words_are_lowercase_ascii() -> None:
    for word in ADJECTIVES + NOUNS:
        assert word.isascii() and word.isalpha() and word.islower(), word

def test_default_words_are_distinct() -> None:
    assert len(set(ADJECTIVES)) == len(ADJECTIVES)
    assert len(set(NOUNS)) == len(NOUNS)

def test_index_lookup_is_stable() -> None:
    """Seeded output depends on these positions never moving."""
    assert DEFAULT_CATALOG.adjective_at(0) == "ancient"
    assert DEFAULT_CATALOG.adjective_at(61) == "silent"
    assert DEFAULT_CATALOG.noun_at(0) == "bird"
    assert DEFAULT_CATALOG.noun_at(57) == "wave"

# ── Bounds ───────────────────────────────────────────────────

def test_out_of_range_index() -> None:
    with pytest.raises(IndexError):
        DEFAULT_CATALOG.adjective_at(62)
    with pytest.raises(IndexError):
        DEFAULT_CATALOG.noun_at(58)

def test_negative_index_does_not_wrap() -> None:
    with pytest.raises(IndexError):
        DEFAULT_CATALOG.adjective_at(-1)
    with pytest.raises(IndexError):
        DEFAULT_CATALOG.noun_at(-1)

# ── Integrity ────────────────────────────────────────────────

def test_empty_list_rejected() -> None:
    with pytest.raises(CatalogError, match="adjective"):
        WordCatalog(adjectives=(), nouns=("moon",))
    with pytest.raises(CatalogError, match="noun"):
        WordCatalog(adjectives=("silent",), nouns=())

def test_duplicate_word_rejected() -> None:
    with pytest.raises(CatalogError, match="duplicate"):
        WordCatalog(adjectives=("red", "red"), nouns=("moon",))

@pytest.mark.parametrize("word", ["Moon", "dark-moon", "moon ", "", "m00n", "café"])
def test_invalid_word_rejected(word: str) -> None:
    with pytest.raises(CatalogError, match="invalid"):
        WordCatalog(adjectives=("silent",), nouns=(word,))

def test_catalog_error_is_value_error() -> None:
    assert issubclass(CatalogError, ValueError)

# ── Immutability ─────────────────────────────────────────────

def test_constructor_freezes_lists() -> None:
    adjectives = ["silent", "dark"]
    catalog = WordCatalog(adjectives=adjectives, nouns=["moon"])  # type: ignore[arg-type]
    adjectives.append("loud")
    assert catalog.adjectives == ("silent", "dark")
    assert isinstance(catalog.nouns, tuple)

def test_catalog_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_CATALOG.adjectives = ("x",)  # type: ignore[misc]
