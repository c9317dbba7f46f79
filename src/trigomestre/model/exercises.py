"""
Exercise Generator
==================
Produces random, guaranteed-solvable trigonometry exercises.

Every candidate is run through the solver and kept only when the result is
valid. Each exercise gets at most ``MAX_GENERATION_ATTEMPTS`` tries; an
exhausted slot yields ``None`` and is left out of generated lists.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from trigomestre.config import (
    SIDE_RANGE,
    ANGLE_RANGE,
    HYPOTENUSE_OFFSET,
    MAX_GENERATION_ATTEMPTS,
    RIGHT_SUBCASE_WEIGHTS,
    DEFAULT_QTY_RIGHT,
    DEFAULT_QTY_OBLIQUE,
)
from trigomestre.model.geometry_utils import deg2rad
from trigomestre.model.solver import solve_triangle
from trigomestre.model.triangle import TriangleMode, TriangleData, OBLIQUE_MODES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GivenValues:
    """The values shown to the student, with their labels."""
    val1: float
    label1: str
    val2: float
    label2: str
    val3: Optional[float] = None
    label3: str = ""

    def items(self) -> list[tuple[str, float]]:
        """(label, value) pairs of the values that are actually given."""
        pairs = [(self.label1, self.val1), (self.label2, self.val2)]
        if self.val3 is not None:
            pairs.append((self.label3, self.val3))
        return pairs


@dataclass(frozen=True)
class TrigoExercise:
    id: int
    mode: TriangleMode
    given: GivenValues
    solution: TriangleData


@dataclass(frozen=True)
class _Candidate:
    given: GivenValues
    # What the solver receives; differs from ``given`` for converted right cases
    solver_inputs: tuple[float, float, float]


class ExerciseGenerator:
    """
    Random exercise factory.

    Args:
        rng: Source of randomness. Pass a seeded ``numpy.random.Generator``
            for reproducible worksheets.
        right_weights: Probabilities of the right-triangle sub-cases
            (two legs, hypotenuse + angle, leg + angle).
        max_attempts: Solver calls allowed per exercise.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        right_weights: Sequence[float] = RIGHT_SUBCASE_WEIGHTS,
        max_attempts: int = MAX_GENERATION_ATTEMPTS
    ) -> None:
        if len(right_weights) != 3 or any(w < 0 for w in right_weights) or sum(right_weights) <= 0:
            raise ValueError(f"Invalid right sub-case weights: {right_weights}")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")

        self.rng = rng if rng is not None else np.random.default_rng()
        total = float(sum(right_weights))
        self.right_weights = tuple(w / total for w in right_weights)
        self.max_attempts = max_attempts

    # ------------------------------
    # Random draws
    # ------------------------------

    def random_side(self) -> int:
        low, high = SIDE_RANGE
        return int(self.rng.integers(low, high + 1))

    def random_angle(self) -> int:
        low, high = ANGLE_RANGE
        return int(self.rng.integers(low, high + 1))

    def _right_candidate(self) -> _Candidate:
        draw = self.rng.random()
        legs_weight, hyp_weight, _ = self.right_weights

        if draw < legs_weight:
            a, b = self.random_side(), self.random_side()
            return _Candidate(
                GivenValues(a, "Cateto a", b, "Cateto b"),
                (a, b, 0.0),
            )

        if draw < legs_weight + hyp_weight:
            hyp = self.random_side() + HYPOTENUSE_OFFSET
            angle = self.random_angle()
            rad = deg2rad(angle)
            return _Candidate(
                GivenValues(hyp, "Hipotenusa", angle, "Ângulo A"),
                (hyp * math.sin(rad), hyp * math.cos(rad), 0.0),
            )

        leg = self.random_side()
        angle = self.random_angle()
        rad = deg2rad(angle)
        if self.rng.random() > 0.5:
            # adjacent leg b given
            return _Candidate(
                GivenValues(leg, "Cateto b", angle, "Ângulo A"),
                (leg * math.tan(rad), leg, 0.0),
            )
        # opposite leg a given
        return _Candidate(
            GivenValues(leg, "Cateto a", angle, "Ângulo A"),
            (leg, leg / math.tan(rad), 0.0),
        )

    def _sss_candidate(self) -> _Candidate:
        a, b = self.random_side(), self.random_side()
        # Third side strictly inside (|a - b|, a + b)
        c = int(self.rng.integers(abs(a - b) + 1, a + b))
        return _Candidate(GivenValues(a, "a", b, "b", c, "c"), (a, b, c))

    def _candidate(self, mode: TriangleMode) -> _Candidate:
        if mode == TriangleMode.RIGHT:
            return self._right_candidate()
        if mode == TriangleMode.SSS:
            return self._sss_candidate()
        if mode == TriangleMode.SAS:
            v1, v2, v3 = self.random_side(), self.random_angle(), self.random_side()
            return _Candidate(GivenValues(v1, "b", v2, "Âng A", v3, "c"), (v1, v2, v3))
        if mode == TriangleMode.ASA:
            v1, v2, v3 = self.random_angle(), self.random_side(), self.random_angle()
            return _Candidate(GivenValues(v1, "Âng A", v2, "c", v3, "Âng B"), (v1, v2, v3))
        if mode == TriangleMode.AAS:
            v1, v2, v3 = self.random_angle(), self.random_angle(), self.random_side()
            return _Candidate(GivenValues(v1, "Âng A", v2, "Âng B", v3, "a"), (v1, v2, v3))
        raise ValueError(f"Exercises cannot be generated for mode '{mode}'.")

    # ------------------------------
    # Public API
    # ------------------------------

    def generate(self, mode: TriangleMode | str, exercise_id: int) -> Optional[TrigoExercise]:
        """
        Draw one solvable exercise.

        Args:
            mode: ``Right`` or one of the oblique modes.
            exercise_id: Id stored on the exercise.

        Returns:
            The exercise, or None when every attempt produced an invalid triangle.
        """
        mode = TriangleMode(mode)
        for attempt in range(1, self.max_attempts + 1):
            candidate = self._candidate(mode)
            solution = solve_triangle(mode, *candidate.solver_inputs)
            if solution.valid:
                logger.debug(f"Generated {mode} exercise #{exercise_id} after {attempt} attempt(s).")
                return TrigoExercise(
                    id=exercise_id,
                    mode=mode,
                    given=candidate.given,
                    solution=solution,
                )

        logger.warning(f"Gave up on {mode} exercise #{exercise_id} after {self.max_attempts} attempts.")
        return None

    def generate_list(
        self,
        qty_right: int = DEFAULT_QTY_RIGHT,
        qty_oblique: int = DEFAULT_QTY_OBLIQUE
    ) -> list[TrigoExercise]:
        """
        Right-triangle exercises first, then oblique ones with a random mode
        per slot. Ids run from 1 and only successful slots consume one, so the
        list can be shorter than requested.
        """
        if qty_right < 0 or qty_oblique < 0:
            raise ValueError("Exercise quantities must not be negative.")

        exercises: list[TrigoExercise] = []
        next_id = 1

        modes = [TriangleMode.RIGHT] * qty_right
        modes += [OBLIQUE_MODES[int(self.rng.integers(len(OBLIQUE_MODES)))] for _ in range(qty_oblique)]

        for mode in modes:
            exercise = self.generate(mode, next_id)
            if exercise is not None:
                exercises.append(exercise)
                next_id += 1

        requested = qty_right + qty_oblique
        if len(exercises) < requested:
            logger.warning(f"Generated {len(exercises)} of {requested} requested exercises.")
        else:
            logger.info(f"Generated {len(exercises)} exercises.")
        return exercises

    def regenerate(self, exercise: TrigoExercise) -> Optional[TrigoExercise]:
        """Fresh instance with the same id and mode, or None if exhausted."""
        return self.generate(exercise.mode, exercise.id)
