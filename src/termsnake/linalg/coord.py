from __future__ import annotations

from typing import NamedTuple, Sequence


class Coord(NamedTuple):
    """Integer grid vector. Immutable; compares and hashes componentwise."""

    x: int
    y: int

    @classmethod
    def of(cls, values: Sequence[int]) -> Coord:
        assert len(values) == 2, f"Coord needs exactly 2 values, got {len(values)}"
        return cls(int(values[0]), int(values[1]))

    @classmethod
    def parse(cls, text: str) -> Coord:
        """Parse a "WxH" string, e.g. "25x15"."""
        try:
            values = [int(part) for part in text.lower().split("x")]
        except ValueError as e:
            raise ValueError(f"expected WIDTHxHEIGHT, got {text!r}") from e
        if len(values) != 2:
            raise ValueError(f"expected WIDTHxHEIGHT, got {text!r}")
        return cls.of(values)

    def __add__(self, other: Coord) -> Coord:  # type: ignore[override]
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return (self.x, self.y).__repr__()
