"""stackview: interactive browser for call graphs annotated with stack usage."""

from .graph import CallGraph, GraphError, GraphLoadError, Node, UnknownNodeError

__all__ = ["CallGraph", "GraphError", "GraphLoadError", "Node", "UnknownNodeError"]
__version__ = "0.1.0"
