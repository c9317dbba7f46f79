"""
Share Codes
===========
Packs a calculator problem (mode + values) into a text token that survives
copy-paste: JSON, then standard Base64. No compression, no checksum.
"""
from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from typing import Optional, Union

from trigomestre.model.geometry_utils import parse_number
from trigomestre.model.triangle import TriangleMode

logger = logging.getLogger(__name__)

Number = Union[int, float]


class ShareCodeError(ValueError):
    """A share code could not be written or read. The message is user-facing."""


@dataclass(frozen=True)
class SharedProblem:
    mode: TriangleMode
    val1: float
    val2: Optional[float] = None
    val3: Optional[float] = None


def encode_share_code(
    mode: TriangleMode | str,
    val1: Optional[Number],
    val2: Optional[Number] = None,
    val3: Optional[Number] = None
) -> str:
    """
    Serialize a problem into a share code.

    Raises:
        ShareCodeError: If ``val1`` is missing, since such a code could not be read back.
    """
    if val1 is None:
        raise ShareCodeError("Preencha os valores antes de compartilhar.")

    payload = {
        "mode": str(TriangleMode(mode)),
        "val1": val1,
        "val2": val2,
        "val3": val3,
    }
    data = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(data.encode("utf-8")).decode("ascii")


def _optional_value(data: dict, key: str) -> Optional[float]:
    raw = data.get(key)
    if raw is None or raw == "":
        return None
    # bool is an int subclass but never a measurement
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        logger.warning(f"Share code has a non-numeric '{key}': {raw!r}")
        raise ShareCodeError("Código inválido")
    value = parse_number(raw, default=None)
    if value is None:
        raise ShareCodeError("Código inválido")
    return value


def decode_share_code(code: str) -> SharedProblem:
    """
    Read a share code.

    Raises:
        ShareCodeError: If the code is not valid Base64/JSON, or lacks a known
            ``mode`` or a numeric ``val1``.
    """
    try:
        raw = base64.b64decode(code.strip(), validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (ValueError, AttributeError) as e:
        # binascii.Error, UnicodeDecodeError and JSONDecodeError are all ValueErrors
        logger.warning(f"Could not decode share code: {e}")
        raise ShareCodeError("Erro ao ler código. Verifique se está completo.") from e

    if not isinstance(data, dict) or not data.get("mode") or data.get("val1") in (None, ""):
        logger.warning("Share code is missing 'mode' or 'val1'.")
        raise ShareCodeError("Código inválido")

    if not isinstance(data["mode"], str):
        logger.warning(f"Share code has a non-text mode {data['mode']!r}.")
        raise ShareCodeError("Código inválido")

    try:
        mode = TriangleMode(data["mode"])
    except ValueError as e:
        logger.warning(f"Share code has unknown mode {data['mode']!r}.")
        raise ShareCodeError("Código inválido") from e

    return SharedProblem(
        mode=mode,
        val1=_optional_value(data, "val1"),
        val2=_optional_value(data, "val2"),
        val3=_optional_value(data, "val3"),
    )
