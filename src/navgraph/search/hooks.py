# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, start, goal, heuristic: str): ...
    def expand(self, node, *, g: float, qsize: int, seq: int): ...
    def search_end(self, *, outcome: str, path_len: int, cost, stats, wall_ms: float): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def error(self, **_):
        pass
