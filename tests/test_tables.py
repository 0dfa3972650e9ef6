"""Tests for the word tables."""

from uuid_pokemon.tables import ADJECTIVES, POKEMONS


def test_table_sizes():
    """Table sizes are part of the mapping and must not change."""
    assert len(ADJECTIVES) == 140
    assert len(POKEMONS) == 811


def test_entries_are_distinct():
    """Every table entry appears once."""
    assert len(set(ADJECTIVES)) == len(ADJECTIVES)
    assert len(set(POKEMONS)) == len(POKEMONS)


def test_entries_are_single_words():
    """Entries are non-empty and contain no whitespace."""
    for word in ADJECTIVES + POKEMONS:
        assert word
        assert word.split() == [word]


def test_table_order():
    """Spot-check positions fixed by published labels."""
    assert ADJECTIVES[0] == "Busy"
    assert POKEMONS[0] == "bulbasaur"
    assert POKEMONS[161] == "furret"
    assert POKEMONS[720] == "volcanion"
    assert POKEMONS[721] == "deoxys-attack"
    assert POKEMONS[-1] == "beedrill-mega"


def test_adjectives_are_capitalized():
    """Adjectives start the label so they are capitalized."""
    for word in ADJECTIVES:
        assert word[0].isupper()
