"""
Answer Validation
=================
Compares typed answers against a stored solution.

Sides are correct within an absolute tolerance; angles are correct when their
integer parts match. Missing or unparseable answers count as 0.
"""
from __future__ import annotations

import math
from typing import Dict, Mapping, Optional

from trigomestre.config import SIDE_TOLERANCE
from trigomestre.model.geometry_utils import parse_number
from trigomestre.model.exercises import TrigoExercise
from trigomestre.model.triangle import SIDE_KEYS, ANGLE_KEYS

ANSWER_FIELDS: tuple[str, ...] = SIDE_KEYS + ANGLE_KEYS


def is_side_correct(answer: Optional[str], expected: float, tolerance: float = SIDE_TOLERANCE) -> bool:
    value = parse_number(answer, default=0.0)
    return abs(value - expected) <= tolerance


def is_angle_correct(answer: Optional[str], expected: float) -> bool:
    value = parse_number(answer, default=0.0)
    return math.floor(value) == math.floor(expected)


def check_answers(exercise: TrigoExercise, answers: Mapping[str, Optional[str]]) -> Dict[str, bool]:
    """
    Validate the six answer fields of one exercise.

    Args:
        exercise: The exercise holding the solution.
        answers: Field key ("a", "b", "c", "A", "B", "C") to typed text.
            Absent keys are treated like empty answers.

    Returns:
        Field key to correctness, for all six fields.
    """
    solution = exercise.solution
    results: Dict[str, bool] = {}
    for key in SIDE_KEYS:
        results[key] = is_side_correct(answers.get(key), solution.side(key))
    for key in ANGLE_KEYS:
        results[key] = is_angle_correct(answers.get(key), solution.angle(key))
    return results
