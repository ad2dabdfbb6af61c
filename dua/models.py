from __future__ import annotations
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(Enum):
    UNKNOWN = " "
    FILE = "f"
    DIRECTORY = "d"
    OTHER = "?"

    @property
    def marker(self) -> str:
        return self.value


@dataclass(eq=False)
class Node:
    path: str
    kind: NodeKind = NodeKind.UNKNOWN
    own_size: int = 0
    children: List["Node"] = field(default_factory=list)
    # None until the selector computes it
    cached_total: Optional[int] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip("\\/")) or self.path

    def iter_all(self) -> Iterator["Node"]:
        """Yield this node and all of its descendants, parents first."""
        yield self
        for child in self.children:
            yield from child.iter_all()


@dataclass
class ScanResult:
    root: Node
    files: int
    dirs: int
    others: int
    errors: List[str]
    elapsed_sec: float
