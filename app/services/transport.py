import logging
from typing import Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict

# =========================
# Config
# =========================
BASE_URL = "https://www.mercadobitcoin.net/"
TICKER_PATH = "api/BTC/ticker/"

log = logging.getLogger("cp2cripto")


class TransportOk(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str


class TransportFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    cause: str


TransportResult = Union[TransportOk, TransportFailure]


def ticker_url() -> str:
    return BASE_URL + TICKER_PATH


async def fetch_ticker(client: Optional[httpx.AsyncClient] = None) -> TransportResult:
    """
    Um único GET no endpoint do ticker, sem retry e sem timeout customizado.
    Qualquer status HTTP volta como TransportOk; só erros abaixo do HTTP
    (DNS, conexão, timeout) viram TransportFailure.
    """
    url = ticker_url()
    log.debug("GET %s", url)
    try:
        if client is not None:
            r = await client.get(url)
        else:
            async with httpx.AsyncClient() as own:
                r = await own.get(url)
    except httpx.HTTPError as e:
        cause = str(e) or e.__class__.__name__
        log.warning("falha de transporte em %s: %s", url, cause)
        return TransportFailure(cause=cause)
    return TransportOk(status_code=r.status_code, body=r.text)
