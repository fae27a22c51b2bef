"""Immutable call graph with stack-usage annotations.

Nodes live in a dense append-only list and a node handle is simply its index.
Nothing is ever removed, so a handle stays valid for the lifetime of the graph.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class GraphError(Exception):
    """Base class for graph errors reported before the browser starts."""


class GraphLoadError(GraphError):
    """The graph document could not be read or is malformed."""


class UnknownNodeError(GraphError):
    """A requested node handle does not exist in the graph."""


@dataclass(frozen=True)
class Node:
    """A function with its own stack frame cost and worst-case total.

    `max` is None when the worst case is unknown or unbounded (recursion,
    indirect calls).
    """

    name: str
    local: int = 0
    max: int | None = None

    def describe(self) -> str:
        max_s = "?" if self.max is None else str(self.max)
        return f"max {max_s:<10} local = {self.local:<5} {self.name}"


class CallGraph:
    """Directed call graph; an edge caller -> callee is a direct call."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._callees: list[list[int]] = []

    def add_node(self, node: Node) -> int:
        if node.local < 0 or (node.max is not None and node.max < 0):
            raise ValueError(f"negative stack cost on {node.name!r}")
        self._nodes.append(node)
        self._callees.append([])
        return len(self._nodes) - 1

    def add_edge(self, caller: int, callee: int) -> None:
        """Record a direct call. Repeated calls to the same callee collapse."""
        for handle in (caller, callee):
            if handle not in self:
                raise UnknownNodeError(f"no node with handle {handle}")
        if callee not in self._callees[caller]:
            self._callees[caller].append(callee)

    def node(self, handle: int) -> Node | None:
        if handle in self:
            return self._nodes[handle]
        return None

    def callees(self, handle: int) -> list[int]:
        """Distinct callees of `handle` in enumeration order."""
        if handle not in self:
            return []
        return list(self._callees[handle])

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, int) and not isinstance(handle, bool) and 0 <= handle < len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._nodes)))
