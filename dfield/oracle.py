import numpy as np

from .config import FieldConfig
from .grid import INT32_MAX
from .magnitude import cost_to_magnitude
from .parallel import parallel_rows
from .source import seed_mask


def seed_coords(src, threshold=128, channel=None):
    """(S,2) int64 array of (x, y) seed coordinates in row-major order."""
    ys, xs = np.nonzero(seed_mask(src, threshold, channel))
    return np.stack([xs, ys], axis=1).astype(np.int64)


def bruteforce_cost(src, config=None):
    """Exact squared distance to the nearest seed by exhaustive search.

    O(w*h*S); meant for checking the fast transform on small images.
    Pixels get INT32_MAX when the image has no seeds.
    """
    config = config or FieldConfig()
    mask = seed_mask(src, config.threshold, config.channel)
    h, w = mask.shape
    pts = seed_coords(mask, 0)
    out = np.full((h, w), INT32_MAX, np.int64)
    if len(pts) == 0:
        return out
    sx = pts[:, 0][None, :]
    sy = pts[:, 1][None, :]
    px = np.arange(w, dtype=np.int64)[:, None]

    def rows(a, b):
        for y in range(a, b):
            d = (sx - px) ** 2 + (sy - y) ** 2
            out[y] = d.min(axis=1)

    parallel_rows(rows, h, config.num_workers)
    return out


def bruteforce_field(src, config=None):
    config = config or FieldConfig()
    return cost_to_magnitude(bruteforce_cost(src, config), config.scale)
