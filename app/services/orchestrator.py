import logging
from datetime import tzinfo
from typing import Dict, Optional

import httpx

from app.models.ticker import DisplayUpdate, FetchState
from app.services.decoder import DecodeError, decode
from app.services.formatting import format_currency, format_timestamp
from app.services.transport import TransportFailure, TransportResult, fetch_ticker

log = logging.getLogger("cp2cripto")

# =========================
# Mensagens de erro
# =========================
STATUS_MESSAGES: Dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
}
UNKNOWN_ERROR = "Unknown error"
TRANSPORT_FAILURE_PREFIX = "Falha na chamada: "


def message_for_status(status_code: int) -> str:
    # códigos fora da tabela (500, 429...) caem no genérico
    return STATUS_MESSAGES.get(status_code, UNKNOWN_ERROR)


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


class TickerDisplay:
    """Slots de saída entregues à camada de apresentação."""

    def __init__(self) -> None:
        self.value_text: Optional[str] = None
        self.date_text: Optional[str] = None
        self.notification: Optional[str] = None

    def apply(self, update: DisplayUpdate) -> None:
        if update.error is not None:
            self.notification = update.error
            return
        # preço não numérico: mantém o valor anterior na tela
        if update.value is not None:
            self.value_text = update.value
        if update.date is not None:
            self.date_text = update.date

    def dismiss(self) -> None:
        self.notification = None


class TickerOrchestrator:
    """
    Um ciclo de busca por gatilho do usuário:
    transporte -> status HTTP -> decode -> formatação -> slots.

    Não há cache, retry nem de-duplicação. Gatilhos concorrentes rodam em
    paralelo e o último a terminar sobrescreve os slots. Pelo mesmo motivo,
    `state` é só indicativo: reflete a transição mais recente de qualquer gatilho.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, tz: Optional[tzinfo] = None):
        self.client = client
        self.tz = tz
        self.state = FetchState.IDLE

    async def refresh(self, display: Optional[TickerDisplay] = None) -> DisplayUpdate:
        self.state = FetchState.FETCHING
        result = await fetch_ticker(self.client)
        update = self._classify(result)
        self.state = update.state
        if display is not None:
            display.apply(update)
        return update

    def _classify(self, result: TransportResult) -> DisplayUpdate:
        if isinstance(result, TransportFailure):
            return DisplayUpdate(state=FetchState.ERROR_SHOWN, error=TRANSPORT_FAILURE_PREFIX + result.cause)

        if not is_success(result.status_code):
            msg = message_for_status(result.status_code)
            log.info("ticker respondeu %s (%s)", result.status_code, msg)
            return DisplayUpdate(state=FetchState.ERROR_SHOWN, error=msg)

        try:
            snapshot = decode(result.body)
        except DecodeError as e:
            # 2xx sem ticker válido: nenhuma atualização e nenhuma notificação
            log.warning("resposta %s descartada: %s", result.status_code, e)
            return DisplayUpdate(state=FetchState.IDLE)

        try:
            date_text = format_timestamp(snapshot.date, self.tz)
        except (ValueError, OverflowError, OSError) as e:
            # data válida em UTC mas fora do alcance no fuso de exibição
            log.warning("data %s fora do alcance: %s", snapshot.date, e)
            return DisplayUpdate(state=FetchState.IDLE)

        return DisplayUpdate(
            state=FetchState.DISPLAYING,
            value=format_currency(snapshot.last),
            date=date_text,
            ticker=snapshot,
        )
