# fringe_lab/config.py
# Quiz tunables. Each one can be overridden from the environment
# (FRINGE_MIN_SIZE=3 fringe-quiz ...).
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from typing import Mapping

from .core.store import EntryBounds

_ENV_VARS = {
    "min_fringe": "FRINGE_MIN_SIZE",
    "max_fringe": "FRINGE_MAX_SIZE",
    "min_path": "FRINGE_MIN_PATH",
    "max_path": "FRINGE_MAX_PATH",
    "min_cost": "FRINGE_MIN_COST",
    "max_cost": "FRINGE_MAX_COST",
    "first_question": "FRINGE_FIRST_QUESTION",
    "last_question": "FRINGE_LAST_QUESTION",
    "history_size": "FRINGE_HISTORY",
}


@dataclass(frozen=True)
class QuizSettings:
    min_fringe: int = 5        # entries per generated fringe
    max_fringe: int = 8
    min_path: int = 2          # labels per path
    max_path: int = 9
    min_cost: int = 1
    max_cost: int = 14
    first_question: int = 0    # question numbers to draw from
    last_question: int = 4
    history_size: int = 5      # answers kept for display

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "QuizSettings":
        overrides = {}
        for name, var in _ENV_VARS.items():
            raw = environ.get(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[name] = int(raw)
            except ValueError:
                raise ValueError(f"{var} must be an integer, got {raw!r}") from None
        return replace(cls(), **overrides).validate()

    def validate(self) -> "QuizSettings":
        for lo, hi in (("min_fringe", "max_fringe"), ("min_path", "max_path"),
                       ("min_cost", "max_cost"), ("first_question", "last_question")):
            if getattr(self, lo) > getattr(self, hi):
                raise ValueError(f"{lo} ({getattr(self, lo)}) is greater than {hi} ({getattr(self, hi)})")
        if self.min_fringe < 1 or self.min_path < 1 or self.history_size < 1:
            raise ValueError("fringe size, path length and history size must be at least 1")
        if self.min_cost < 0:
            raise ValueError("path costs cannot be negative")
        return self

    def entry_bounds(self) -> EntryBounds:
        return EntryBounds(self.min_path, self.max_path, self.min_cost, self.max_cost)

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
