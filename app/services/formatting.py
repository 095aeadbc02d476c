import os
import math
from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

# =========================
# Config
# =========================
# Fuso de exibição (IANA, ex: America/Sao_Paulo); vazio = fuso local da máquina
TICKER_TIMEZONE = os.getenv("TICKER_TIMEZONE", "").strip()

CURRENCY_SYMBOL = "R$"
DATE_PATTERN = "%d/%m/%Y %H:%M:%S"


def _display_tz() -> Optional[tzinfo]:
    return ZoneInfo(TICKER_TIMEZONE) if TICKER_TIMEZONE else None


def _to_float(text: str) -> Optional[float]:
    # float() aceita "1_000"; para nós não é número
    if isinstance(text, str) and "_" in text:
        return None
    try:
        v = float(text)
    except (TypeError, ValueError):
        return None
    if math.isnan(v) or math.isinf(v):
        return None
    return v


def format_currency(raw_last: str) -> Optional[str]:
    """
    Formata o preço no padrão pt-BR: "R$ 295.000,00" (espaço não separável
    após o símbolo, como no CLDR). Texto não numérico -> None, e quem chama
    não deve atualizar o valor exibido.
    """
    v = _to_float(raw_last)
    if v is None:
        return None
    # 1,234.50 -> 1.234,50
    digits = f"{abs(v):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if round(v, 2) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}\u00a0{digits}"


def format_timestamp(epoch_seconds: int, tz: Optional[tzinfo] = None) -> str:
    dt = datetime.fromtimestamp(epoch_seconds, tz=tz or _display_tz())
    return dt.strftime(DATE_PATTERN)
