# fringe_lab/quiz/questions.py
# One question per strategy: "which fringe entry does <algorithm> expand next?"
# The accepted answers are computed from the fringe, so a tie gives more than
# one correct position.
from __future__ import annotations
import numbers
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from ..core.random_source import RandomSource
from ..core.store import FrontierStore
from ..core.strategies import Strategy


@dataclass(frozen=True)
class Question:
    number: int
    strategy: Strategy
    prompt: str


def _ask(strategy: Strategy) -> str:
    return f"Which node in the fringe will {strategy.long_name} ({strategy.value}) expand next?"


QUESTIONS: List[Question] = [
    Question(i, s, _ask(s)) for i, s in enumerate((
        Strategy.BREADTH_FIRST,
        Strategy.DEPTH_FIRST,
        Strategy.UNIFORM_COST,
        Strategy.GREEDY,
        Strategy.A_STAR,
    ))
]


class QuestionBank:
    def __init__(self, rng: RandomSource, first_question: int = 0,
                 last_question: int = len(QUESTIONS) - 1, history_size: int = 5):
        if not 0 <= first_question <= last_question < len(QUESTIONS):
            raise ValueError(
                f"question range [{first_question}, {last_question}] "
                f"must lie within [0, {len(QUESTIONS) - 1}]")
        self.rng = rng
        self.first_question = first_question
        self.last_question = last_question
        self.current: Optional[Question] = None
        self.answers: Optional[List[int]] = None
        self.answer_history: Deque[bool] = deque(maxlen=history_size)

    def choose_question(self) -> Question:
        self.current = QUESTIONS[self.rng.randint(self.first_question, self.last_question)]
        self.answers = None
        return self.current

    def set_answers(self, store: FrontierStore) -> List[int]:
        if self.current is None:
            raise RuntimeError("choose_question() must be called before set_answers()")
        self.answers = store.candidate_indices(self.current.strategy)
        return self.answers

    def check_answer(self, position: Optional[int]) -> bool:
        """Grade a learner's answer and record the outcome.

        `position` is a fringe index, or None when the learner gave no usable
        answer (graded wrong). Other types, bools included, raise TypeError.
        """
        if self.current is None:
            raise RuntimeError("no question has been asked")
        if self.answers is None:
            raise RuntimeError("set_answers() must be called before check_answer()")
        if position is not None and (isinstance(position, bool) or not isinstance(position, numbers.Integral)):
            raise TypeError(f"answer must be a fringe position, got {position!r}")
        correct = position is not None and position in self.answers
        self.answer_history.append(correct)
        return correct
