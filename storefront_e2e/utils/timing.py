"""Wall-clock measurement for request latency checks."""
import time
from typing import Any, Callable


def measure_response_time(request: Callable[[], Any]) -> float:
    """Run ``request`` once and return how long it took in milliseconds."""
    start = time.perf_counter()
    request()
    return (time.perf_counter() - start) * 1000
