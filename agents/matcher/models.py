"""
Matcher Models
Catalog container and resolution result types.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field


class Catalog(Mapping):
    """
    Read-only, ordered mapping of display name -> non-negative integer.

    Iteration follows declaration order, which is also the tie-break order
    used by the resolvers. There are no mutating operations.
    """

    __slots__ = ("_name", "_entries")

    def __init__(
        self,
        name: str,
        items: Union[Mapping, Iterable[Tuple[str, int]]]
    ):
        pairs = items.items() if isinstance(items, Mapping) else items
        entries: Dict[str, int] = {}
        for key, value in pairs:
            if not isinstance(key, str) or not key:
                raise ValueError(f"Catalog '{name}': invalid key {key!r}")
            if key in entries:
                raise ValueError(f"Catalog '{name}': duplicate key '{key}'")
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"Catalog '{name}': value for '{key}' must be a non-negative integer, got {value!r}"
                )
            entries[key] = value
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_entries", MappingProxyType(entries))

    def __setattr__(self, key, value):
        raise AttributeError("Catalog is immutable")

    def __getitem__(self, key: str) -> int:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog(name={self._name!r}, size={len(self)})"

    @property
    def name(self) -> str:
        return self._name


class MatchResult(BaseModel):
    """Outcome of resolving one free-text query against a catalog"""
    matched: bool = Field(..., description="Whether an acceptable catalog entry was found")
    name: Optional[str] = Field(None, description="Catalog key, present only when matched")
    value: Optional[int] = Field(None, description="Catalog value for the key")
    distance: Optional[int] = Field(None, description="Edit distance of the accepted key (0 for substring hits)")
    strategy: Optional[Literal["substring", "nearest"]] = Field(
        None,
        description="Which pass accepted the key"
    )

    model_config = {
        "frozen": True
    }

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(matched=False)

    @classmethod
    def hit(cls, name: str, value: int, distance: int, strategy: str) -> "MatchResult":
        return cls(matched=True, name=name, value=value, distance=distance, strategy=strategy)

    def to_dict(self) -> Dict[str, Any]:
        """Public shape: {matched, name, value} or just {matched: False}"""
        if not self.matched:
            return {"matched": False}
        return {"matched": True, "name": self.name, "value": self.value}
