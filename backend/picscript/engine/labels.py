"""Labels: names that refer back to placed items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from picscript.engine.items import Item

# Refers to the base item unless a label with this name exists
LAST = "last"


@dataclass
class Label:
    name: str
    item: Item | None = None


class LabelTable:
    """Bound labels plus those waiting for the next drawing command."""

    def __init__(self) -> None:
        self._bound: dict[str, Label] = {}
        self.pending: list[Label] = []

    def find(self, name: str) -> Item | None:
        label = self._bound.get(name)
        return label.item if label is not None else None

    def is_bound(self, name: str) -> bool:
        return name in self._bound

    def add_pending(self, name: str) -> None:
        self.pending.append(Label(name))

    def bind_pending(self, item: Item) -> list[str]:
        """Point every pending label at ``item``. Returns the names bound."""
        names = []
        for label in self.pending:
            label.item = item
            self._bound[label.name] = label
            names.append(label.name)
        self.pending = []
        return names

    def drain_pending(self) -> list[str]:
        """Drop labels that no drawing command consumed."""
        names = [label.name for label in reversed(self.pending)]
        self.pending = []
        return names

    def __len__(self) -> int:
        return len(self._bound)
