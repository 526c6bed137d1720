# fringe_lab/quiz/session.py
# A QuizSession owns one FrontierStore and one QuestionBank. The host
# constructs it explicitly; nothing is created at import time.
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import QuizSettings
from ..core.entry import FrontierEntry
from ..core.random_source import RandomSource
from ..core.store import FrontierStore
from .questions import Question, QuestionBank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Round:
    question: Question
    entries: Tuple[FrontierEntry, ...]


class QuizSession:
    def __init__(self, rng: RandomSource, settings: Optional[QuizSettings] = None):
        self.settings = (settings or QuizSettings()).validate()
        self.rng = rng
        self.store = FrontierStore(rng, bounds=self.settings.entry_bounds())
        self.questions = QuestionBank(
            rng,
            first_question=self.settings.first_question,
            last_question=self.settings.last_question,
            history_size=self.settings.history_size,
        )
        self.current: Optional[Round] = None

    @property
    def answer_history(self):
        return tuple(self.questions.answer_history)

    def new_round(self) -> Round:
        """Fresh fringe, fresh question, answers stored for grading."""
        s = self.settings
        self.store.populate_random(self.rng.randint(s.min_fringe, s.max_fringe))
        question = self.questions.choose_question()
        answers = self.questions.set_answers(self.store)
        self.current = Round(question, self.store.entries)
        logger.debug("question %d (%s), %d entries, answers %s",
                     question.number, question.strategy.value, len(self.store), answers)
        return self.current

    def submit(self, position) -> bool:
        if self.current is None:
            raise RuntimeError("new_round() must be called before submit()")
        correct = self.questions.check_answer(position)
        logger.debug("answer %r -> %s", position, "correct" if correct else "wrong")
        return correct
