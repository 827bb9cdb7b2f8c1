from __future__ import annotations

from typing import Annotated

from annotated_types import Ge
from pydantic import BaseModel, ConfigDict, Field

# Type alias for cube counts and game ids
NonNegativeInt = Annotated[int, Ge(0)]


class CubeSet(BaseModel):
    """Counts of red, green and blue cubes, either drawn at once or held in a bag."""

    model_config = ConfigDict(frozen=True)

    red: NonNegativeInt = 0
    green: NonNegativeInt = 0
    blue: NonNegativeInt = 0

    def __str__(self) -> str:
        parts = [
            f"{count} {color}"
            for color, count in (
                ("red", self.red),
                ("green", self.green),
                ("blue", self.blue),
            )
            if count
        ]
        return ", ".join(parts) if parts else "empty"

    def possible_with(self, bag: CubeSet) -> bool:
        """Return True if this draw could have come out of ``bag``."""
        return (
            self.red <= bag.red and self.green <= bag.green and self.blue <= bag.blue
        )


class Game(BaseModel):
    """One game: an id and the cube sets revealed during it."""

    model_config = ConfigDict(frozen=True)

    id: NonNegativeInt
    sets: tuple[CubeSet, ...] = Field(default_factory=tuple)

    def possible_with(self, bag: CubeSet) -> bool:
        """Return True if every revealed set could have come out of ``bag``."""
        return all(cube_set.possible_with(bag) for cube_set in self.sets)
