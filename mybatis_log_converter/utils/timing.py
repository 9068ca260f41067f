from time import perf_counter
from typing import Any, Callable, Dict

def timed(func: Callable, *args: Any, **kwargs: Any) -> Dict[str, Any]:
    """Run *func* and return its result dict augmented with duration_s.

    Conversions usually finish in well under a millisecond, hence the
    high-resolution clock and four decimals.
    """
    start = perf_counter()
    result = func(*args, **kwargs)
    if isinstance(result, dict):
        result["duration_s"] = round(perf_counter() - start, 4)
    return result
