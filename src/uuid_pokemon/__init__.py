"""Translate UUIDs into short pokemon names.

The names make it easy to talk about objects, e.g. "Busy bulbasaur" for
00000000-0000-0000-0000-000000000000. Several UUIDs map to the same name;
context such as the owner of an object usually tells them apart.
"""

from .label import PokemonUuid, LabelNotFoundError
from .encoding import derive_index, uuid_to_pokemon, pokemon_from_text
from .tables import ADJECTIVES, POKEMONS

__all__ = [
    "PokemonUuid",
    "LabelNotFoundError",
    "derive_index",
    "uuid_to_pokemon",
    "pokemon_from_text",
    "ADJECTIVES",
    "POKEMONS",
]
