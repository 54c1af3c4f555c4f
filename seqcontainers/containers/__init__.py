"""Container implementations: DynArray, FixedArray and LinkedList."""

from .dynarray import DynArray
from .fixed_array import FixedArray
from .linked_list import LinkedList

__all__ = ["DynArray", "FixedArray", "LinkedList"]
