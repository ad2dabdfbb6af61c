from __future__ import annotations
from typing import List

from .config import DEFAULT_THRESHOLD, DEFAULT_TOP_N, SelectorConfig
from .models import Node


def total_size(node: Node) -> int:
    """Own size plus the totals of all children, computed once per node."""
    if node.cached_total is None:
        node.cached_total = node.own_size + sum(total_size(c) for c in node.children)
    return node.cached_total


def includes_self(node: Node, threshold: float) -> bool:
    # a child holding more than `threshold` of the parent's bytes explains the
    # parent, which then no longer competes for a slot of its own
    limit = total_size(node) * threshold
    return not any(total_size(c) > limit for c in node.children)


def collect_candidates(node: Node, config: SelectorConfig) -> List[Node]:
    """Candidates for ``node``'s subtree, unsorted and untruncated."""
    limit = total_size(node) * config.threshold
    include_self = True
    out: List[Node] = []
    for child in node.children:
        if total_size(child) > limit:
            include_self = False
        # every child contributes its candidates, dominant or not
        out.extend(collect_candidates(child, config))
    if include_self:
        out.append(node)
    return out


def top_n(root: Node, n: int = DEFAULT_TOP_N, threshold: float = DEFAULT_THRESHOLD) -> List[Node]:
    """Largest candidates under ``root``, biggest first; ``n == 0`` keeps all.

    Ties keep discovery order.
    """
    config = SelectorConfig(threshold=threshold, limit=n)
    top = collect_candidates(root, config)
    top.sort(key=lambda x: -total_size(x))
    if config.limit > 0:
        return top[:config.limit]
    return top
