"""Map UUIDs to pokemon labels and back."""

import logging
import uuid
from typing import Dict

from .label import LabelNotFoundError, PokemonUuid
from .tables import ADJECTIVES, POKEMONS

logger = logging.getLogger(__name__)

# Byte offsets of the two 8-byte halves of a UUID.
ADJECTIVE_OFFSET = 0
POKEMON_OFFSET = 8

_POKEMON_INDEX: Dict[str, int] = {name: i for i, name in enumerate(POKEMONS)}


def derive_index(data: bytes, offset: int, table_length: int) -> int:
    """
    Derive a table index from eight bytes of a UUID.

    The bytes at offset..offset+4 are multiplied pairwise with the bytes
    at offset+4..offset+8, the four products summed and the sum reduced
    modulo table_length.

    Args:
        data: The 16 raw UUID bytes
        offset: 0 for the first half, 8 for the second
        table_length: Length of the table being indexed

    Returns:
        Index in [0, table_length)
    """
    if table_length <= 0:
        raise ValueError(f"table_length must be positive, got {table_length}")
    if offset < 0 or offset + 8 > len(data):
        raise ValueError(f"offset {offset} out of range for {len(data)} bytes")

    first = data[offset:offset + 4]
    second = data[offset + 4:offset + 8]
    total = sum(a * b for a, b in zip(first, second))
    return total % table_length


def uuid_to_pokemon(value: uuid.UUID) -> PokemonUuid:
    """
    Convert a UUID into its pokemon label.

    The mapping is deterministic but not injective: distinct UUIDs may
    share a label.
    """
    data = value.bytes
    adj_index = derive_index(data, ADJECTIVE_OFFSET, len(ADJECTIVES))
    pok_index = derive_index(data, POKEMON_OFFSET, len(POKEMONS))
    return PokemonUuid(ADJECTIVES[adj_index], POKEMONS[pok_index])


def pokemon_from_text(text: str) -> PokemonUuid:
    """
    Parse the rendered form of a label back into a PokemonUuid.

    Every adjective is tried as a prefix, so table entries containing
    spaces are still matched exactly.

    Raises:
        LabelNotFoundError: text is not "<adjective> <pokemon>" for
            entries of the word tables
    """
    for adjective in ADJECTIVES:
        prefix = f"{adjective} "
        if not text.startswith(prefix):
            continue
        index = _POKEMON_INDEX.get(text[len(prefix):])
        if index is not None:
            return PokemonUuid(adjective, POKEMONS[index])

    logger.debug(f"No pokemon label matches {text!r}")
    raise LabelNotFoundError(text)
