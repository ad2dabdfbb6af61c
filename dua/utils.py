from __future__ import annotations

from .models import Node
from .selector import total_size

UNITS = ["b", "KB", "MB", "GB", "TB", "PB"]


def format_bytes(num: int) -> str:
    """Right-aligned, 1024-based size: ``'    512  b'``, ``'   1.50 KB'``."""
    if num < 1024:
        return f"{int(num):7d}  b"
    x = float(num)
    for u in UNITS[1:]:
        x /= 1024.0
        if x < 1024.0 or u == UNITS[-1]:
            return f"{x:7.2f} {u}"
    return f"{x:7.2f} PB"


def format_line(node: Node) -> str:
    return f"{format_bytes(total_size(node))} [{node.kind.marker}] {node.path}"
