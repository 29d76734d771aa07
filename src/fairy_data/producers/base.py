"""Base producer - the uniform random number source shared by all producers."""

from typing import Any, Sequence, TypeVar
import random

T = TypeVar("T")


class BaseProducer:
    """Uniform random values over inclusive numeric ranges.

    All producers created by one Fairy share a single BaseProducer so that a
    seed makes the whole generation run reproducible.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    def random_between(self, low: Any, high: Any) -> Any:
        """Draw a value uniformly from the inclusive range [low, high].

        Integers produce integers and anything else produces floats. Ranges
        whose width does not fit into a float (e.g. the full float range) are
        still drawn without overflowing.

        Raises:
            ValueError: If low is greater than high
        """
        if low > high:
            raise ValueError(f"low ({low}) must not be greater than high ({high})")

        if isinstance(low, int) and isinstance(high, int):
            return self._rng.randint(low, high)

        r = self._rng.random()
        value = float(low) * (1.0 - r) + float(high) * r
        return min(max(value, float(low)), float(high))

    def random_int(self, max_value: int) -> int:
        """Draw an integer from [0, max_value]."""
        return self.random_between(0, max_value)

    def random_element(self, elements: Sequence[T]) -> T:
        if not elements:
            raise ValueError("cannot pick an element from an empty sequence")
        return elements[self.random_between(0, len(elements) - 1)]
