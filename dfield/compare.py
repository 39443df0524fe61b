import time

import numpy as np

from .config import FieldConfig, log
from .field import compute_cost
from .grid import INT32_MAX
from .magnitude import cost_to_magnitude
from .oracle import bruteforce_cost


def compare_with_oracle(src, config=None):
    """Run the fast transform and the brute-force oracle on ``src``.

    Errors are measured on Euclidean distance (pixels) over non-seed pixels
    reachable from some seed; an image without seeds reports zero error.
    Return:
        dict with max_abs_error, mean_abs_error, max_rel_error,
        underestimates (cells where fast cost < exact cost),
        mismatched_pixels (differing uint8 outputs), fast_ms, bruteforce_ms,
        plus the two cost arrays under 'fast_cost' and 'exact_cost'
    """
    config = config or FieldConfig()
    t0 = time.perf_counter()
    fast = compute_cost(src, config).astype(np.int64)
    t1 = time.perf_counter()
    exact = bruteforce_cost(src, config)
    t2 = time.perf_counter()

    # cells the oracle cannot reach (no seeds) hold sentinels on both sides
    reached = exact != INT32_MAX
    off = reached & (exact > 0)
    d_fast = np.sqrt(fast[off].astype(np.float64))
    d_exact = np.sqrt(exact[off].astype(np.float64))
    err = np.abs(d_fast - d_exact)
    stats = {
        "max_abs_error": float(err.max()) if err.size else 0.0,
        "mean_abs_error": float(err.mean()) if err.size else 0.0,
        "max_rel_error": float((err / d_exact).max()) if err.size else 0.0,
        "underestimates": int(np.count_nonzero(fast[reached] < exact[reached])),
        "mismatched_pixels": int(np.count_nonzero(
            cost_to_magnitude(fast, config.scale) != cost_to_magnitude(exact, config.scale))),
        "fast_ms": (t1 - t0) * 1000,
        "bruteforce_ms": (t2 - t1) * 1000,
        "fast_cost": fast,
        "exact_cost": exact,
    }
    log(config, f"oracle: max_abs={stats['max_abs_error']:.3f} mean_abs={stats['mean_abs_error']:.4f} "
                f"under={stats['underestimates']} mismatched={stats['mismatched_pixels']}")
    return stats
