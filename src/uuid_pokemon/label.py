"""Pokemon label value type."""

from dataclasses import dataclass
from typing import Tuple


class LabelNotFoundError(LookupError):
    """Raised when text does not name a known adjective and pokemon."""

    def __init__(self, text: str):
        super().__init__(f"{text!r} is not a known pokemon label")
        self.text = text


@dataclass(frozen=True, eq=False)
class PokemonUuid:
    """
    Human readable label for a UUID.

    Compares equal to another label with the same adjective and pokemon,
    and to a string holding exactly its rendered form.
    """

    adjective: str
    pokemon: str

    @classmethod
    def from_pair(cls, pair: Tuple[str, str]) -> "PokemonUuid":
        """
        Wrap a raw (adjective, pokemon) pair without checking the tables.

        Use pokemon_from_text() when the words come from user input.
        """
        adjective, pokemon = pair
        return cls(adjective=adjective, pokemon=pokemon)

    def to_text(self) -> str:
        """Render as "<Adjective> <pokemon>"."""
        return f"{self.adjective} {self.pokemon}"

    def __str__(self) -> str:
        return self.to_text()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PokemonUuid):
            return (self.adjective, self.pokemon) == (other.adjective, other.pokemon)
        if isinstance(other, str):
            return self.to_text() == other
        return NotImplemented

    def __hash__(self) -> int:
        # Same hash as the rendered string so labels and strings mix in sets.
        return hash(self.to_text())
