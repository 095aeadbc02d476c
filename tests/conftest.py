import copy

import pytest

SCENARIO_A = {
    "ticker": {
        "high": "300000.00",
        "low": "290000.00",
        "vol": "10.5",
        "last": "295000.00",
        "buy": "294500.00",
        "sell": "295500.00",
        "date": 1683513600,
    }
}


@pytest.fixture
def ticker_body() -> dict:
    return copy.deepcopy(SCENARIO_A)
