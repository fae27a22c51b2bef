"""Call graph navigation engine."""
from __future__ import annotations

import logging

from ..graph import CallGraph, UnknownNodeError
from .state import ItemRow, ViewSnapshot

logger = logging.getLogger(__name__)

# Rows are ranked only when more than this many are shown (self row included).
RANK_MIN_ROWS = 3


class Navigator:
    """Stack-based descent through a call graph.

    Holds the view of one node at a time:
    - Select on a callee row: push the current node onto history and descend
    - Back: pop history and redisplay that node (there is no forward stack)
    - items[0] is always the node itself, the rest are its callees ranked
      by worst-case stack usage
    """

    def __init__(self, graph: CallGraph, root: int = 0):
        """Open the view on `root`.

        Args:
            graph: Call graph to browse; never modified
            root: Handle of the starting node

        Raises:
            UnknownNodeError: The graph is empty or has no node `root`
        """
        if root not in graph:
            if len(graph) == 0:
                raise UnknownNodeError("the call graph has no nodes")
            raise UnknownNodeError(f"root {root} is not a node of the graph (0..{len(graph) - 1})")

        self.graph = graph
        self._current = root
        self._items: list[ItemRow] = []
        self._cursor = 0
        self._history: list[int] = []
        self.load_items(root, push_history=False)

    @property
    def current(self) -> int:
        return self._current

    @property
    def items(self) -> tuple[ItemRow, ...]:
        return tuple(self._items)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def history(self) -> tuple[int, ...]:
        return tuple(self._history)

    def load_items(self, node: int, push_history: bool) -> None:
        """Rebuild the rows for `node` and make it current.

        A handle that is not in the graph is ignored and the view is left
        exactly as it was.

        Args:
            node: Handle to display
            push_history: Remember the node being left so Back can return to it
        """
        target = self.graph.node(node)
        if target is None:
            logger.debug("ignoring navigation to unknown node %r", node)
            return

        if push_history:
            self._push_history(node)
        self._current = node

        items = [ItemRow(node=node, sort_key=0, label=f"{node} {target.describe()}")]
        for callee in self.graph.callees(node):
            info = self.graph.node(callee)
            # Unknown worst case ranks as 0.
            key = info.max if info.max is not None else 0
            items.append(ItemRow(node=callee, sort_key=key, label=f" {callee:<5} {info.describe()}"))

        if len(items) > RANK_MIN_ROWS:
            items[1:] = sorted(items[1:], key=lambda row: row.sort_key, reverse=True)

        self._items = items
        self._cursor = 0

    def _push_history(self, target: int) -> None:
        # Recursive call chains can lead back onto the path; unwind to that
        # node instead so history never holds the current node.
        if target in self._history:
            del self._history[self._history.index(target):]
        elif target != self._current:
            self._history.append(self._current)

    def back(self) -> None:
        """Return to the node we descended from, if any."""
        if self._history:
            self.load_items(self._history.pop(), push_history=False)

    def select(self) -> None:
        """Descend into the callee under the cursor.

        The self row is not a callee, so selecting it does nothing.
        """
        if self._cursor == 0:
            return
        self.load_items(self._items[self._cursor].node, push_history=True)

    def move_next(self) -> None:
        if self._items:
            self._cursor = (self._cursor + 1) % len(self._items)

    def move_prev(self) -> None:
        if self._items:
            self._cursor = (self._cursor - 1) % len(self._items)

    def depth(self) -> int:
        """Number of nodes on the path, current node included."""
        return len(self._history) + 1

    def breadcrumbs(self) -> str:
        """Path from the root to the current node, like "main > init > probe"."""
        names = [self.graph.node(h).name for h in (*self._history, self._current)]
        return " > ".join(names)

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            current=self._current,
            items=tuple(self._items),
            cursor=self._cursor,
            history=tuple(self._history),
            breadcrumbs=self.breadcrumbs(),
        )
