from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class TickerSnapshot(BaseModel):
    """Snapshot do ticker BTC/BRL do Mercado Bitcoin (preços chegam como texto)."""

    model_config = ConfigDict(frozen=True)

    high: StrictStr = Field(..., description="Maior preço negociado no período")
    low: StrictStr = Field(..., description="Menor preço negociado no período")
    vol: StrictStr = Field(..., description="Volume negociado")
    last: StrictStr = Field(..., description="Preço da última negociação")
    buy: StrictStr = Field(..., description="Maior oferta de compra")
    sell: StrictStr = Field(..., description="Menor oferta de venda")
    # 253402300799 = 31/12/9999 23:59:59 UTC, limite do datetime
    date: StrictInt = Field(..., ge=0, le=253402300799, description="Timestamp Unix em segundos")


class TickerEnvelope(BaseModel):
    # corpo da API: {"ticker": {...}}
    ticker: TickerSnapshot


class FetchState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    DISPLAYING = "displaying"
    ERROR_SHOWN = "error_shown"


class DisplayUpdate(BaseModel):
    state: FetchState
    value: Optional[str] = Field(None, description="Preço formatado; None = não mexer no valor exibido")
    date: Optional[str] = Field(None, description="Data/hora formatada do snapshot")
    error: Optional[str] = Field(None, description="Mensagem da notificação transitória")
    ticker: Optional[TickerSnapshot] = None
