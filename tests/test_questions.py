import random

import pytest

from fringe_lab.core.strategies import Strategy
from fringe_lab.quiz.questions import QUESTIONS, QuestionBank


def test_one_question_per_strategy():
    assert [q.number for q in QUESTIONS] == [0, 1, 2, 3, 4]
    assert [q.strategy for q in QUESTIONS] == list(Strategy)
    assert "uniform-cost search" in QUESTIONS[2].prompt


def test_choose_and_grade_tie(abc_store, scripted):
    bank = QuestionBank(scripted([2]))
    assert bank.choose_question().strategy is Strategy.UNIFORM_COST
    assert bank.set_answers(abc_store) == [1, 2]
    assert bank.check_answer(2)
    assert bank.check_answer(1)
    assert not bank.check_answer(0)
    assert list(bank.answer_history) == [True, True, False]


def test_question_range_is_respected():
    bank = QuestionBank(random.Random(3), first_question=3, last_question=4)
    chosen = {bank.choose_question().number for _ in range(50)}
    assert chosen <= {3, 4}


def test_history_is_bounded(abc_store, scripted):
    bank = QuestionBank(scripted([0]), history_size=2)
    bank.choose_question()
    bank.set_answers(abc_store)
    for answer in (0, 1, 0):
        bank.check_answer(answer)
    assert list(bank.answer_history) == [False, True]


def test_order_of_calls_enforced(abc_store):
    bank = QuestionBank(random.Random(0))
    with pytest.raises(RuntimeError):
        bank.set_answers(abc_store)
    with pytest.raises(RuntimeError):
        bank.check_answer(0)
    bank.choose_question()
    with pytest.raises(RuntimeError):
        bank.check_answer(0)
    assert list(bank.answer_history) == []


@pytest.mark.parametrize("first,last", [(-1, 4), (0, 5), (3, 2)])
def test_bad_ranges(first, last):
    with pytest.raises(ValueError):
        QuestionBank(random.Random(0), first_question=first, last_question=last)


@pytest.mark.parametrize("answer", [True, False, "1", 1.0])
def test_non_integer_answers_rejected(abc_store, scripted, answer):
    bank = QuestionBank(scripted([2]))
    bank.choose_question()
    bank.set_answers(abc_store)
    with pytest.raises(TypeError):
        bank.check_answer(answer)
    assert list(bank.answer_history) == []


def test_missing_answer_graded_wrong(abc_store, scripted):
    bank = QuestionBank(scripted([0]))
    bank.choose_question()
    bank.set_answers(abc_store)
    assert not bank.check_answer(None)
    assert list(bank.answer_history) == [False]
