# fringe_lab/cli.py
# Terminal version of the fringe quiz: shows a random fringe, asks which entry
# a strategy expands next, grades the answer.
from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import QuizSettings
from .core.random_source import make_random_source
from .logging_config import setup_logging
from .plots.tables import frontier_table
from .quiz.session import QuizSession

logger = logging.getLogger(__name__)


def _history_line(history) -> str:
    return " ".join("✓" if ok else "✗" for ok in history) or "(none yet)"


def _read_position(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run_quiz(session: QuizSession, rounds: int, ask: Optional[Callable[[str], str]] = None,
             out: Callable[[str], None] = print, plot_path: Optional[Path] = None) -> int:
    """Play up to `rounds` rounds; returns the number answered correctly."""
    ask = ask or input
    score = answered = 0
    last = None  # (round, accepted positions) of the last answered round
    for n in range(1, rounds + 1):
        rnd = session.new_round()
        out(f"\nRound {n}/{rounds}")
        out(frontier_table(rnd.entries).to_string())
        out(rnd.question.prompt)
        try:
            raw = ask("position> ")
        except EOFError:
            out("\nStopping.")
            break
        correct = session.submit(_read_position(raw))
        answered += 1
        score += correct
        accepted = session.questions.answers
        last = (rnd, accepted)
        if correct:
            out("Correct!")
        else:
            out(f"Not quite. Accepted: {', '.join(map(str, accepted))}")
        out(f"Recent answers: {_history_line(session.answer_history)}")

    if plot_path is not None and last is not None:
        from .plots.plotting import fig_to_png_bytes, plot_frontier
        rnd, accepted = last
        fig = plot_frontier(rnd.entries, title=rnd.question.prompt, highlight=accepted)
        plot_path.write_bytes(fig_to_png_bytes(fig))
        out(f"Wrote {plot_path}")
    out(f"\nScore: {score}/{answered}")
    return score


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Quiz yourself on which fringe node a search strategy expands next.")
    ap.add_argument("--seed", type=int, default=None, help="random seed (repeatable quizzes)")
    ap.add_argument("--rounds", type=int, default=5)
    ap.add_argument("--rng", choices=["stdlib", "numpy"], default="stdlib", help="random number backend")
    ap.add_argument("--plot", type=Path, default=None, help="save a chart of the last fringe to this PNG")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    if args.rounds < 1:
        ap.error("--rounds must be at least 1")
    try:
        setup_logging(args.log_level)
        settings = QuizSettings.from_env()
    except ValueError as e:
        raise SystemExit(f"fringe-quiz: {e}")

    logger.debug("settings: %s", settings.as_dict())
    session = QuizSession(make_random_source(args.seed, args.rng), settings)
    run_quiz(session, args.rounds, plot_path=args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
