"""
Prediction Service

Naive next-fill-up estimates. No model is trained here:
- predict_next_consumption / predict_next_total_amount blend the last
  two entries.
- The *_async variants emulate a remote prediction API: they snapshot the
  last five entries, wait a fixed delay on a worker thread and return a
  plain average scaled by a random factor in [0.9, 1.1].
"""

import atexit
import logging
import random
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

from fueltracker.calculations import (
    calculate_consumption_with_fallback,
    calculate_mean,
)
from fueltracker.calculations.constants import (
    API_JITTER_MAX,
    API_JITTER_MIN,
    API_PREDICTION_DELAY_SECONDS,
    API_PREDICTION_WINDOW_SIZE,
    PREDICTION_WINDOW_SIZE,
)
from fueltracker.config import Config

logger = logging.getLogger(__name__)

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def get_executor() -> ThreadPoolExecutor:
    """
    Get or create the worker pool for simulated remote predictions.
    """
    global _executor

    if _executor is None:
        with _executor_lock:
            if _executor is None:
                _executor = ThreadPoolExecutor(
                    max_workers=Config.PREDICTION_API_WORKERS,
                    thread_name_prefix="prediction",
                )
                atexit.register(_executor.shutdown, wait=False)
                logger.info(f"Started prediction worker pool ({Config.PREDICTION_API_WORKERS} workers)")

    return _executor


def predict_next_consumption(entries) -> Optional[float]:
    """
    Predict next consumption as the mean of the last two entries' consumption.

    Entries without a distance are divided by 1, so they report liters * 100.

    Returns:
        Predicted L/100 distance units, or None with fewer than 2 entries

    Examples:
        Entries (40 L, 500 km) then (45 L, 450 km) -> (8.0 + 10.0) / 2 = 9.0
    """
    if len(entries) < PREDICTION_WINDOW_SIZE:
        return None

    window = entries[-PREDICTION_WINDOW_SIZE:]
    consumptions = [calculate_consumption_with_fallback(e.liters, e.distance) for e in window]
    return calculate_mean(consumptions)


def predict_next_total_amount(entries) -> Optional[float]:
    """
    Predict the next fill-up cost as average price * average liters of the last two entries.
    """
    if len(entries) < PREDICTION_WINDOW_SIZE:
        return None

    window = entries[-PREDICTION_WINDOW_SIZE:]
    avg_price = calculate_mean([e.price_per_liter for e in window])
    avg_liters = calculate_mean([e.liters for e in window])
    return avg_price * avg_liters


def _snapshot(entries) -> List[Tuple[float, float]]:
    """Copy (liters, price_per_liter) of the last entries so later edits cannot leak in."""
    return [(e.liters, e.price_per_liter) for e in list(entries)[-API_PREDICTION_WINDOW_SIZE:]]


def _jitter(rng) -> float:
    return rng.uniform(API_JITTER_MIN, API_JITTER_MAX)


def _simulated_consumption(window: List[Tuple[float, float]], delay: float, rng) -> Optional[float]:
    time.sleep(delay)
    if not window:
        return None

    average_liters = sum(liters for liters, _ in window) / max(len(window), 1)
    return average_liters * _jitter(rng)


def _simulated_total_amount(window: List[Tuple[float, float]], delay: float, rng) -> Optional[float]:
    time.sleep(delay)
    if not window:
        return None

    count = max(len(window), 1)
    average_price = sum(price for _, price in window) / count
    average_liters = sum(liters for liters, _ in window) / count
    return average_price * average_liters * _jitter(rng)


def _submit(
    simulate: Callable,
    entries,
    callback: Optional[Callable[[Optional[float]], None]],
    delay: Optional[float],
    rng,
) -> Future:
    window = _snapshot(entries)
    delay = API_PREDICTION_DELAY_SECONDS if delay is None else delay
    rng = rng or random

    future = get_executor().submit(simulate, window, delay, rng)
    logger.debug(f"Submitted simulated prediction over {len(window)} entries (delay {delay}s)")

    if callback is not None:
        future.add_done_callback(lambda f: callback(f.result()))

    return future


def predict_next_consumption_async(
    entries,
    callback: Optional[Callable[[Optional[float]], None]] = None,
    delay: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Future:
    """
    Simulated remote prediction of the next fill-up volume.

    The last 5 entries are captured before this returns. After the delay the
    future resolves to their average liters times a uniform factor in
    [0.9, 1.1], or None if there were no entries. Concurrent calls may
    complete in any order.

    Args:
        entries: Fuel entries, oldest first
        callback: Called once with the result when it is ready
        delay: Artificial latency in seconds (default from Config)
        rng: Random source, e.g. random.Random(seed) for reproducible noise

    Returns:
        concurrent.futures.Future resolving to Optional[float]
    """
    return _submit(_simulated_consumption, entries, callback, delay, rng)


def predict_next_total_amount_async(
    entries,
    callback: Optional[Callable[[Optional[float]], None]] = None,
    delay: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Future:
    """
    Simulated remote prediction of the next fill-up cost.

    Same window, delay and noise as predict_next_consumption_async, applied
    to average price * average liters.
    """
    return _submit(_simulated_total_amount, entries, callback, delay, rng)
