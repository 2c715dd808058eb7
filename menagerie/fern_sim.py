"""Simulate the growth of ferns, from individual cells on up."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import List, Union


@dataclass
class Cell:
    """A biological cell at a point in the plane."""

    x: float
    y: float

    def distance_from_origin(self) -> float:
        """Return the cell's distance from the origin."""
        return math.hypot(self.x, self.y)


@dataclass
class Spore:
    """A cell made by an adult fern that disperses on the wind."""

    x: bool = False


@dataclass
class Sporangium:
    """A compartment, usually under a leaf, where spores form."""

    x: bool = False


def produce_spore(factory: Sporangium) -> Spore:
    """Simulate the production of a spore by meiosis."""
    return Spore(x=False)


@dataclass
class Leaf:
    """An individual leaf."""

    x: bool = False


@dataclass
class Root:
    """An individual root."""

    x: bool = False


@dataclass
class Stem:
    """A stem, which holds the plant's weight and shapes it."""

    furled: bool


class FernType(Enum):
    """The kinds of fern the simulation knows."""

    FIDDLEHEAD = "fiddlehead"


class Fern:
    """A fern, modelled by its roots and stems."""

    def __init__(self, fern_type: FernType = FernType.FIDDLEHEAD) -> None:
        self.fern_type = fern_type
        self.roots: List[Root] = []
        self.stems: List[Stem] = [Stem(furled=True)]

    def is_furled(self) -> bool:
        """Return True unless every stem has unfurled."""
        return not self.is_fully_unfurled()

    def is_fully_unfurled(self) -> bool:
        """Return True if no stem is still furled."""
        return all(not stem.furled for stem in self.stems)


class Terrarium:
    """The simulated universe."""

    def __init__(self) -> None:
        self.ferns: List[Fern] = []

    @classmethod
    def load(cls, filename: Union[str, "object"]) -> "Terrarium":
        """Load a terrarium from a ``.tm`` file, which must exist."""
        with open(filename, "rb"):  # type: ignore[arg-type]
            pass
        terrarium = cls()
        terrarium.ferns.append(Fern(FernType.FIDDLEHEAD))
        return terrarium

    def fern(self, index: int) -> Fern:
        """Return the fern at ``index``."""
        return self.ferns[index]

    def apply_sunlight(self, time: timedelta) -> None:
        """Let the sun shine for ``time``, unfurling every stem."""
        for fern in self.ferns:
            for stem in fern.stems:
                stem.furled = False