from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .graph import CallGraph, GraphLoadError, Node

logger = logging.getLogger(__name__)


class NodeIn(BaseModel):
    name: str
    local: int = Field(default=0, ge=0)
    max: int | None = Field(default=None, ge=0)


class GraphDocument(BaseModel):
    """On-disk form of a call graph written by the stack analysis pipeline.

    Edges are `[caller, callee]` index pairs in enumeration order.
    """

    nodes: list[NodeIn] = Field(default_factory=list)
    edges: list[tuple[int, int]] = Field(default_factory=list)
    root: int | None = None


def build_graph(doc: GraphDocument) -> CallGraph:
    graph = CallGraph()
    for n in doc.nodes:
        graph.add_node(Node(name=n.name, local=n.local, max=n.max))

    for i, (caller, callee) in enumerate(doc.edges):
        if caller not in graph or callee not in graph:
            raise GraphLoadError(
                f"edge #{i} [{caller}, {callee}] references a node that does not exist "
                f"(graph has {len(graph)} nodes)"
            )
        graph.add_edge(caller, callee)
    return graph


def parse_graph(raw: str | bytes) -> tuple[CallGraph, int | None]:
    """Parse a JSON graph document.

    Returns the graph and the document's root handle (None if it names none).
    """
    try:
        doc = GraphDocument.model_validate(json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise GraphLoadError(f"invalid JSON: {e}") from e
    except ValidationError as e:
        raise GraphLoadError(f"invalid graph document: {e}") from e
    return build_graph(doc), doc.root


def load_graph(path: Path) -> tuple[CallGraph, int | None]:
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise GraphLoadError(f"cannot read {path}: {e.strerror or e}") from e

    graph, root = parse_graph(raw)
    logger.info("loaded call graph from %s (%d nodes)", path, len(graph))
    return graph, root
