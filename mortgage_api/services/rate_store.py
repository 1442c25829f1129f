# This project was developed with assistance from AI tools.
"""Interest rate store.

Holds the single annual interest rate used by every payment and mortgage
calculation. One instance is created per application at startup (see
``main.lifespan``) and handed to routes through the ``get_rate_store``
dependency, so tests can build independent stores.
"""

import math
import threading
from typing import Annotated

from fastapi import Depends, Request

from .errors import InvalidRate


def _check_rate(rate: float) -> float:
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise InvalidRate()
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidRate()
    return float(rate)


class RateStore:
    """Thread-safe holder for the current annual interest rate."""

    def __init__(self, initial_rate: float):
        self._rate = _check_rate(initial_rate)
        self._lock = threading.Lock()

    def current(self) -> float:
        with self._lock:
            return self._rate

    def replace(self, new_rate: float) -> float:
        """Swap in ``new_rate`` and return the rate it replaced.

        Raises InvalidRate when ``new_rate`` is not a positive finite number;
        the stored rate is left unchanged in that case.
        """
        rate = _check_rate(new_rate)
        with self._lock:
            previous = self._rate
            self._rate = rate
        return previous


def get_rate_store(request: Request) -> RateStore:
    """FastAPI dependency: the store owned by the running application."""
    store = getattr(request.app.state, "rate_store", None)
    if store is None:
        raise RuntimeError("RateStore not initialised -- application lifespan has not run")
    return store


RateStoreDep = Annotated[RateStore, Depends(get_rate_store)]
