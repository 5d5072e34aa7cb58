from .coord import Coord

__all__ = ["Coord"]
