# io/search_logging.py
import itertools
import json
import logging
import sys
import threading
from dataclasses import asdict, is_dataclass

from navgraph.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=repr)


def _default_json_logger(name="navgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for search lifecycle events.
    Per-expansion records are emitted only in debug mode, sampled every `sample_every`.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._ids = itertools.count(1)
        self._local = threading.local()  # one search runs start-to-end on one thread

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, "search": getattr(self._local, "search", None)}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def search_start(self, *, start, goal, heuristic: str):
        self._local.search = next(self._ids)
        self._emit("INFO", "search_start", start=start, goal=goal, heuristic=heuristic)

    def expand(self, node, *, g: float, qsize: int, seq: int):
        if self.debug and (seq % self.sample_every) == 0:
            self._emit("DEBUG", "expand", node=node, g=g, qsize=qsize, seq=seq)

    def search_end(self, *, outcome: str, path_len: int, cost, stats, wall_ms: float):
        extra = asdict(stats) if is_dataclass(stats) else {}
        self._emit(
            "INFO",
            "search_end",
            outcome=outcome,
            path_len=path_len,
            cost=cost,
            wall_ms=round(wall_ms, 3),
            **extra,
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "search_error", reason=reason, **kw)
