"""
Triangle Data Model
===================
Defines the solving modes, their UI metadata and the immutable result record
produced by the solver.

Classes:
    TriangleMode: The combination of known quantities.
    CevianLengths: Per-side lengths of heights, medians or bisectors.
    TriangleData: The solver output.
    SolverMessage: User-facing failure messages.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import StrEnum
from typing import Any, Dict, Optional

SIDE_KEYS: tuple[str, str, str] = ("a", "b", "c")
ANGLE_KEYS: tuple[str, str, str] = ("A", "B", "C")


class TriangleMode(StrEnum):
    RIGHT = "Right"
    RIGHT_HYP_CAT = "Right_HypCat"
    RIGHT_CAT_ANG = "Right_CatAng"
    RIGHT_HYP_ANG = "Right_HypAng"
    SSS = "SSS"
    SAS = "SAS"
    ASA = "ASA"
    AAS = "AAS"

    @property
    def is_right(self) -> bool:
        """Right-triangle modes take two inputs and ignore the third."""
        return self.value.startswith("Right")

    @property
    def label(self) -> str:
        return MODE_METADATA[self].label

    @property
    def inputs(self) -> tuple[str, ...]:
        return MODE_METADATA[self].inputs


@dataclass(frozen=True)
class ModeMetadata:
    label: str
    inputs: tuple[str, ...]


MODE_METADATA: Dict[TriangleMode, ModeMetadata] = {
    TriangleMode.RIGHT: ModeMetadata("Triângulo Retângulo", ("Cateto a", "Cateto b")),
    TriangleMode.RIGHT_HYP_CAT: ModeMetadata("Triângulo Retângulo", ("Hipotenusa (c)", "Cateto (a)")),
    TriangleMode.RIGHT_CAT_ANG: ModeMetadata("Triângulo Retângulo", ("Cateto (a)", "Ângulo A (oposto)")),
    TriangleMode.RIGHT_HYP_ANG: ModeMetadata("Triângulo Retângulo", ("Hipotenusa (c)", "Ângulo A")),
    TriangleMode.SSS: ModeMetadata("Lado-Lado-Lado (LLL)", ("Lado a", "Lado b", "Lado c")),
    TriangleMode.SAS: ModeMetadata("Lado-Ângulo-Lado (LAL)", ("Lado b", "Ângulo A (°)", "Lado c")),
    TriangleMode.ASA: ModeMetadata("Ângulo-Lado-Ângulo (ALA)", ("Ângulo A (°)", "Lado c", "Ângulo B (°)")),
    TriangleMode.AAS: ModeMetadata("Lado-Ângulo-Ângulo (LAA)", ("Ângulo A (°)", "Ângulo B (°)", "Lado a")),
}

OBLIQUE_MODES: tuple[TriangleMode, ...] = (
    TriangleMode.SSS,
    TriangleMode.SAS,
    TriangleMode.ASA,
    TriangleMode.AAS,
)


class SolverMessage(StrEnum):
    VALUES_TOO_HIGH = "Valores muito altos. O limite de segurança é 1.000.000."
    NON_POSITIVE = "Os valores devem ser maiores que zero."
    UNKNOWN_MODE = "Modo de cálculo desconhecido."
    TRIANGLE_INEQUALITY = "Impossível formar triângulo: a soma de dois lados deve ser maior que o terceiro."
    ANGLE_OUT_OF_RANGE = "O ângulo deve estar entre 0° e 180°."
    ANGLES_OUT_OF_RANGE = "Os ângulos devem estar entre 0° e 180°."
    ANGLE_SUM_EXCEEDED = "A soma dos ângulos fornecidos deve ser menor que 180°."
    LEG_NOT_SHORTER = "O cateto deve ser menor que a hipotenusa."
    ANGLE_NOT_ACUTE = "O ângulo deve ser agudo (entre 0° e 90°)."
    NUMERIC_ERROR = "Erro numérico durante o cálculo."
    NOT_REAL = "Combinação de valores inválida para um triângulo real."
    INVALID_ANGLES = "Ângulos calculados inválidos. Verifique as entradas."
    ANGLE_SUM_MISMATCH = "Soma dos ângulos não é 180°. Triângulo impossível."
    DEGENERATE_SIDE = "Os lados calculados resultaram em valores nulos ou negativos."


@dataclass(frozen=True)
class CevianLengths:
    """
    Lengths of one family of cevians, keyed by the side they land on.
    ``heights.a`` is the altitude from vertex A onto side a.
    """
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    def __getitem__(self, key: str) -> float:
        if key not in SIDE_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class TriangleData:
    """
    Result of solving a triangle.

    Sides a, b, c lie opposite vertices A, B, C; angles are in degrees. All
    numbers are already display-rounded. When ``valid`` is False every number
    is zero and ``error`` holds the reason, so check ``valid`` first.
    """
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    A: float = 0.0
    B: float = 0.0
    C: float = 0.0
    area: float = 0.0
    perimeter: float = 0.0
    height: float = 0.0  # altitude onto side c
    heights: CevianLengths = field(default_factory=CevianLengths)
    medians: CevianLengths = field(default_factory=CevianLengths)
    bisectors: CevianLengths = field(default_factory=CevianLengths)
    valid: bool = False
    error: Optional[str] = None

    @classmethod
    def invalid(cls, message: str) -> TriangleData:
        return cls(valid=False, error=str(message))

    def side(self, key: str) -> float:
        if key not in SIDE_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def angle(self, key: str) -> float:
        if key not in ANGLE_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
