"""
Session Store
=============
Ephemeral state of a TrigoMestre session: the calculator inputs, the solved
triangle, the generated worksheet and the practice answers.

The store never caches geometry; the triangle is re-derived from the inputs
through the pure solver whenever they change, and views are notified through
Qt signals.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

from trigomestre.model.answers import ANSWER_FIELDS, check_answers
from trigomestre.model.exercises import ExerciseGenerator, TrigoExercise
from trigomestre.model.geometry import DisplayOptions
from trigomestre.model.geometry_utils import parse_number
from trigomestre.model.share_code import ShareCodeError, decode_share_code, encode_share_code
from trigomestre.model.solver import solve_triangle
from trigomestre.model.triangle import TriangleData, TriangleMode

logger = logging.getLogger(__name__)

# (exercise position, answer field)
AnswerKey = tuple[int, str]

DEFAULT_INPUTS = ("3", "4", "5")


def _format_input(value: Optional[float]) -> str:
    if value is None:
        return ""
    if value.is_integer():
        return str(int(value))
    return str(value)


class Store(QObject):
    """Central session store with signals for view sync."""
    triangle_changed = Signal(object)
    exercises_changed = Signal(object)
    answers_changed = Signal(object)
    error_occurred = Signal(str)

    def __init__(self, generator: Optional[ExerciseGenerator] = None) -> None:
        super().__init__()
        self.generator = generator or ExerciseGenerator()
        self.display = DisplayOptions()

        self.mode: TriangleMode = TriangleMode.RIGHT
        self.val1, self.val2, self.val3 = DEFAULT_INPUTS
        self.triangle: Optional[TriangleData] = None

        self.exercises: list[TrigoExercise] = []
        self.user_answers: Dict[AnswerKey, str] = {}
        self.validation_results: Dict[AnswerKey, bool] = {}

        self._resolve()

    # ------------------------------
    # Calculator
    # ------------------------------

    def _resolve(self) -> None:
        v1 = parse_number(self.val1, default=None)
        v2 = parse_number(self.val2, default=None)
        v3 = parse_number(self.val3, default=None)

        if v1 is None or v2 is None or (not self.mode.is_right and v3 is None):
            self.triangle = None
        else:
            self.triangle = solve_triangle(self.mode, v1, v2, v3 if v3 is not None else 0.0)
        self.triangle_changed.emit(self.triangle)

    def set_mode(self, mode: TriangleMode | str) -> None:
        self.mode = TriangleMode(mode)
        logger.debug(f"Mode set to {self.mode}")
        self._resolve()

    def set_inputs(self, val1: str, val2: str, val3: str = "") -> None:
        self.val1, self.val2, self.val3 = val1, val2, val3
        self._resolve()

    # ------------------------------
    # Share codes
    # ------------------------------

    def share_code(self) -> Optional[str]:
        """
        Share code of the current calculator inputs.

        Returns:
            None (and emits ``error_occurred``) if the first two inputs are
            not numbers, since the code could not be loaded back.
        """
        v1 = parse_number(self.val1, default=None)
        v2 = parse_number(self.val2, default=None)
        if v1 is None or v2 is None:
            logger.warning("Share code not created: missing input values.")
            self.error_occurred.emit("Preencha os valores antes de compartilhar.")
            return None
        return encode_share_code(self.mode, v1, v2, parse_number(self.val3, default=None))

    def load_share_code(self, code: str) -> bool:
        """
        Replace the calculator inputs with those of a share code.

        Returns:
            False (and emits ``error_occurred``) if the code is rejected.
        """
        try:
            problem = decode_share_code(code)
        except ShareCodeError as e:
            self.error_occurred.emit(str(e))
            return False

        logger.info(f"Loaded share code for mode {problem.mode}")
        self.mode = problem.mode
        self.val1 = _format_input(problem.val1)
        self.val2 = _format_input(problem.val2)
        self.val3 = _format_input(problem.val3)
        self._resolve()
        return True

    # ------------------------------
    # Worksheet
    # ------------------------------

    def generate_worksheet(self, qty_right: int, qty_oblique: int) -> list[TrigoExercise]:
        self.exercises = self.generator.generate_list(qty_right, qty_oblique)
        self.user_answers = {}
        self.validation_results = {}
        self.exercises_changed.emit(self.exercises)
        self.answers_changed.emit(self.validation_results)
        return self.exercises

    def regenerate_exercise(self, index: int) -> bool:
        """
        Replace the exercise at ``index`` by a fresh one with the same id and mode.

        Returns:
            False if generation was exhausted; the old exercise is then kept.
        """
        self._check_index(index)
        old = self.exercises[index]
        new = self.generator.regenerate(old)
        if new is None:
            self.error_occurred.emit(f"Não foi possível gerar um novo exercício {old.id}.")
            return False

        self.exercises[index] = new
        self._clear_answers(index)
        self.exercises_changed.emit(self.exercises)
        self.answers_changed.emit(self.validation_results)
        return True

    def _check_index(self, index: int) -> None:
        # Answers are keyed by non-negative position
        if not 0 <= index < len(self.exercises):
            raise IndexError(f"No exercise at position {index}.")

    def _clear_answers(self, index: int) -> None:
        self.user_answers = {k: v for k, v in self.user_answers.items() if k[0] != index}
        self.validation_results = {k: v for k, v in self.validation_results.items() if k[0] != index}

    # ------------------------------
    # Practice answers
    # ------------------------------

    def set_answer(self, index: int, field: str, text: str) -> None:
        if field not in ANSWER_FIELDS:
            raise KeyError(f"Unknown answer field '{field}'.")
        self._check_index(index)
        self.user_answers[(index, field)] = text

    def check_answers(self, index: int) -> Dict[str, bool]:
        self._check_index(index)
        exercise = self.exercises[index]
        answers = {f: self.user_answers.get((index, f)) for f in ANSWER_FIELDS}
        results = check_answers(exercise, answers)
        for field, ok in results.items():
            self.validation_results[(index, field)] = ok
        logger.debug(f"Checked exercise #{exercise.id}: {sum(results.values())}/{len(results)} correct")
        self.answers_changed.emit(self.validation_results)
        return results

    def reset(self) -> None:
        """Back to a fresh session."""
        self.display = DisplayOptions()
        self.mode = TriangleMode.RIGHT
        self.val1, self.val2, self.val3 = DEFAULT_INPUTS
        self.exercises = []
        self.user_answers = {}
        self.validation_results = {}
        self.exercises_changed.emit(self.exercises)
        self.answers_changed.emit(self.validation_results)
        self._resolve()
        logger.info("Session state has been reset.")
