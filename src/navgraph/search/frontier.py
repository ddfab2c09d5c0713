# search/frontier.py
from collections.abc import Hashable


class Frontier:
    """
    Binary min-heap of (node, priority) pairs: the open set of A*.

    No decrease-key and no removal of a specific entry: the same node may be
    queued several times with different priorities. Callers re-check popped
    nodes against their own cost bookkeeping.
    """

    __slots__ = ("_items", "_prio")

    def __init__(self):
        self._items: list[Hashable] = []
        self._prio: list[float] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()
        self._prio.clear()

    def push(self, node: Hashable, priority: float) -> None:
        items, prio = self._items, self._prio
        items.append(node)
        prio.append(priority)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) >> 1
            if prio[parent] <= priority:
                break
            items[i], prio[i] = items[parent], prio[parent]
            i = parent
        items[i], prio[i] = node, priority

    def peek_min(self) -> Hashable:
        if not self._items:
            raise IndexError("peek on empty frontier")
        return self._items[0]

    def peek_priority(self) -> float:
        if not self._prio:
            raise IndexError("peek on empty frontier")
        return self._prio[0]

    def extract_min(self) -> tuple[Hashable, float]:
        items, prio = self._items, self._prio
        if not items:
            raise IndexError("extract from empty frontier")
        top = items[0], prio[0]
        node, priority = items.pop(), prio.pop()
        n = len(items)
        if n == 0:
            return top

        # sift the former last element down from the root
        i = 0
        while True:
            smallest, p_small = i, priority
            left = 2 * i + 1
            if left < n and prio[left] < p_small:
                smallest, p_small = left, prio[left]
            right = left + 1
            if right < n and prio[right] < p_small:
                smallest = right
            if smallest == i:
                break
            items[i], prio[i] = items[smallest], prio[smallest]
            i = smallest
        items[i], prio[i] = node, priority
        return top

    def check_invariant(self) -> bool:
        """True when every parent's priority is <= its children's."""
        prio = self._prio
        return all(prio[(i - 1) >> 1] <= prio[i] for i in range(1, len(prio)))
