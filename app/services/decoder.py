import json
from typing import Union

from pydantic import ValidationError

from app.models.ticker import TickerEnvelope, TickerSnapshot


class DecodeError(ValueError):
    """Corpo de resposta 2xx que não tem o formato {"ticker": {...}} esperado."""


def decode(body: Union[str, bytes]) -> TickerSnapshot:
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"JSON inválido: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError("raiz do JSON não é um objeto")
    if "ticker" not in data:
        raise DecodeError("chave 'ticker' ausente")
    try:
        return TickerEnvelope.model_validate(data).ticker
    except ValidationError as e:
        raise DecodeError(f"ticker inválido: {e.error_count()} erro(s)") from e
