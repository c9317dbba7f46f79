"""Step-by-step solving hints printed next to exercises."""
from __future__ import annotations

from typing import Dict

from trigomestre.model.triangle import TriangleMode

_OBLIQUE_ANGLES_FIRST = [
    "1. Encontre o terceiro ângulo sabendo que a soma é 180°.",
    "2. Use a Lei dos Senos para encontrar os dois lados desconhecidos.",
]

SOLVING_STEPS: Dict[TriangleMode, list[str]] = {
    TriangleMode.RIGHT: [
        "1. Identifique os catetos e a hipotenusa.",
        "2. Use o Teorema de Pitágoras (c² = a² + b²) para encontrar o lado desconhecido.",
        "3. Use as relações trigonométricas (seno, cosseno, tangente) para encontrar os ângulos.",
    ],
    TriangleMode.RIGHT_HYP_CAT: [
        "1. Você tem a hipotenusa e um cateto.",
        "2. Use o Teorema de Pitágoras (c² = a² + b²) para encontrar o outro cateto.",
        "3. Use a função inversa do seno (arcsen) para encontrar o ângulo oposto ao cateto dado.",
    ],
    TriangleMode.RIGHT_CAT_ANG: [
        "1. Você tem um cateto e um ângulo agudo.",
        "2. Use a soma dos ângulos internos (90° + A + B = 180°) para encontrar o outro ângulo.",
        "3. Use as funções trigonométricas (seno, cosseno, tangente) para encontrar os lados restantes.",
    ],
    TriangleMode.RIGHT_HYP_ANG: [
        "1. Você tem a hipotenusa e um ângulo agudo.",
        "2. Use a soma dos ângulos internos para encontrar o outro ângulo.",
        "3. Use seno e cosseno para encontrar os catetos (a = c.senA, b = c.cosA).",
    ],
    TriangleMode.SSS: [
        "1. Como você tem os 3 lados, comece pela Lei dos Cossenos.",
        "2. Encontre o ângulo oposto ao maior lado primeiro para evitar ambiguidade.",
        "3. Use a Lei dos Senos para encontrar o segundo ângulo.",
        "4. A soma dos ângulos internos é 180° para achar o terceiro.",
    ],
    TriangleMode.SAS: [
        "1. Use a Lei dos Cossenos para encontrar o lado oposto ao ângulo conhecido.",
        "2. Agora você tem 3 lados. Use a Lei dos Senos para encontrar o menor ângulo desconhecido.",
        "3. Use a soma dos ângulos (180°) para encontrar o último ângulo.",
    ],
    TriangleMode.ASA: _OBLIQUE_ANGLES_FIRST,
    TriangleMode.AAS: _OBLIQUE_ANGLES_FIRST,
}

FALLBACK_STEPS = ["Use a Lei dos Senos ou Cossenos conforme os dados disponíveis."]


def solving_steps(mode: TriangleMode | str) -> list[str]:
    try:
        return list(SOLVING_STEPS[TriangleMode(mode)])
    except ValueError:
        return list(FALLBACK_STEPS)
