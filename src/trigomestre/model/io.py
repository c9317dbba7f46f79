"""
Tabular Export
==============
Flat projections of solved triangles and exercise lists, plus a semicolon
separated CSV writer. Numbers are written with a decimal comma.
"""
from __future__ import annotations

import csv
import logging
import os
from typing import IO, Iterable, Sequence, Union

from trigomestre.config import CSV_DELIMITER
from trigomestre.model.exercises import TrigoExercise
from trigomestre.model.triangle import TriangleData

logger = logging.getLogger(__name__)

Row = Sequence[Union[str, int, float]]

EXERCISE_HEADER = ["ID", "Modo", "Lado a", "Lado b", "Lado c",
                   "Angulo A", "Angulo B", "Angulo C", "Area", "Perimetro"]
RESULTS_HEADER = ["Vértice", "Ângulo", "Lado Oposto", "Altura (h)", "Mediana (m)", "Bissetriz (β)"]


def format_decimal(value: Union[int, float]) -> str:
    """Number as text with comma as decimal separator (36.9 -> "36,9", 90.0 -> "90")."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).replace(".", ",")


def exercise_rows(exercises: Iterable[TrigoExercise]) -> list[list[str]]:
    """Header plus one row per exercise with the solved sides, angles, area and perimeter."""
    rows: list[list[str]] = [list(EXERCISE_HEADER)]
    for ex in exercises:
        s = ex.solution
        rows.append([
            str(ex.id),
            str(ex.mode),
            *(format_decimal(v) for v in (s.a, s.b, s.c, s.A, s.B, s.C, s.area, s.perimeter)),
        ])
    return rows


def results_rows(triangle: TriangleData) -> list[list[str]]:
    """
    Per-vertex table of a solved triangle followed by an area/perimeter row.

    Raises:
        ValueError: If the triangle is not valid.
    """
    if not triangle.valid:
        raise ValueError(f"Cannot export an invalid triangle: {triangle.error}")

    rows: list[list[str]] = [list(RESULTS_HEADER)]
    for vertex in ("A", "B", "C"):
        side = vertex.lower()
        rows.append([
            vertex,
            format_decimal(triangle.angle(vertex)),
            format_decimal(triangle.side(side)),
            format_decimal(triangle.heights[side]),
            format_decimal(triangle.medians[side]),
            format_decimal(triangle.bisectors[side]),
        ])
    rows.append(["Área", format_decimal(triangle.area), "Perímetro", format_decimal(triangle.perimeter)])
    return rows


def results_text(triangle: TriangleData) -> str:
    """Tab separated version of ``results_rows`` for the clipboard."""
    return "\n".join("\t".join(row) for row in results_rows(triangle))


def write_csv(rows: Iterable[Row], target: Union[str, os.PathLike, IO[str]]) -> None:
    """
    Write rows as semicolon separated CSV.

    Args:
        rows: Rows of cells.
        target: A file path (written as UTF-8) or an open text stream.
    """
    if isinstance(target, (str, os.PathLike)):
        logger.info(f"Writing CSV to: {target}")
        with open(target, "w", newline="", encoding="utf-8") as f:
            csv.writer(f, delimiter=CSV_DELIMITER).writerows(rows)
        return

    csv.writer(target, delimiter=CSV_DELIMITER).writerows(rows)
