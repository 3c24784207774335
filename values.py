"""
The decoded value tree.

Every node is one of four immutable variants: ByteString, Integer, List
and Dict. Containers own their children; nothing is shared between nodes.
"""
from dataclasses import dataclass
from types import MappingProxyType


class Value:
    """Base class of all decoded variants."""
    __slots__ = ()

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_python(self):
        raise NotImplementedError


@dataclass(frozen=True)
class ByteString(Value):
    value: str

    def __len__(self):
        return len(self.value)

    def to_python(self):
        return self.value


@dataclass(frozen=True)
class Integer(Value):
    value: int

    def to_python(self):
        return self.value


@dataclass(frozen=True)
class List(Value):
    items: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, 'items', tuple(self.items))

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def to_python(self):
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, eq=False)
class Dict(Value):
    entries: MappingProxyType = None

    def __post_init__(self):
        # Copy so later changes to the caller's dict can't leak in
        object.__setattr__(self, 'entries', MappingProxyType(dict(self.entries or {})))

    def __eq__(self, other):
        if not isinstance(other, Dict):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    __hash__ = None

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def __getitem__(self, key):
        return self.entries[key]

    def to_python(self):
        return {key: value.to_python() for key, value in self.entries.items()}
