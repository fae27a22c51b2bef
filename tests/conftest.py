from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `stackview/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from stackview.graph import CallGraph, Node  # noqa: E402


def make_graph(nodes: list[tuple[str, int | None]], edges: list[tuple[int, int]]) -> CallGraph:
    """Build a graph from (name, max) pairs; local cost is fixed at 8."""
    graph = CallGraph()
    for name, max_cost in nodes:
        graph.add_node(Node(name=name, local=8, max=max_cost))
    for caller, callee in edges:
        graph.add_edge(caller, callee)
    return graph


@pytest.fixture
def graph_factory():
    return make_graph


@pytest.fixture
def abcde_graph() -> CallGraph:
    """A -> {B(8), C(3), D(?)}, B -> {E(20)}; handles 0..4 in that order."""
    return make_graph(
        [("A", 28), ("B", 8), ("C", 3), ("D", None), ("E", 20)],
        [(0, 1), (0, 2), (0, 3), (1, 4)],
    )


@pytest.fixture
def graph_doc() -> dict:
    """JSON document form of the A..E graph."""
    return {
        "nodes": [
            {"name": "A", "local": 8, "max": 28},
            {"name": "B", "local": 8, "max": 8},
            {"name": "C", "local": 8, "max": 3},
            {"name": "D", "local": 8, "max": None},
            {"name": "E", "local": 8, "max": 20},
        ],
        "edges": [[0, 1], [0, 2], [0, 3], [1, 4]],
        "root": 0,
    }
