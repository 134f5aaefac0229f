# pricewise/utils/helper.py
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from quart import jsonify


_CENT = Decimal("0.01")


def round_money(value: float) -> float:
    """Bulatkan ke 2 desimal, half away from zero, pada nilai biner float yang eksak.

    Nilai non-finite (overflow inf / nan) dikembalikan apa adanya.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(value)
    with localcontext() as ctx:
        # digit bulat + 2 desimal harus muat di presisi context
        ctx.prec = max(28, exact.adjusted() + 3)
        return float(exact.quantize(_CENT, rounding=ROUND_HALF_UP))


def to_number(raw: Any) -> Optional[float | int]:
    """
    Parse query param numerik. None bila kosong / bukan angka.
    Nilai bulat dikembalikan sebagai int.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        number = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def error_response(message: str, http_status: int, **extra: Any):
    payload = {"error": message, **extra}
    return jsonify(payload), http_status


def validation_details(exc: ValidationError) -> List[Dict[str, Any]]:
    """Ringkas error pydantic jadi payload JSON (loc + msg)."""
    return [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
        for err in exc.errors()
    ]
