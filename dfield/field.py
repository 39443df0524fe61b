import time

import numpy as np

from .config import FieldConfig, log
from .grid import PaddedGrid
from .magnitude import cost_to_magnitude
from .parallel import parallel_rows
from .scan import run_scan
from .source import as_intensity


def build_grid(src, config=None):
    """Seed a padded grid from ``src`` and run the scan driver on it."""
    config = config or FieldConfig()
    t0 = time.perf_counter()
    seeds = as_intensity(src, config.channel) > config.threshold
    h, w = seeds.shape
    grid = PaddedGrid(w, h)
    grid.fill_border()
    parallel_rows(lambda a, b: grid.fill_rows(seeds, a, b), h, config.num_workers)
    t1 = time.perf_counter()
    log(config, f"seed {w}x{h}, {int(seeds.sum())} seeds: {(t1 - t0) * 1000:.1f} ms")
    run_scan(grid, config.connectivity)
    log(config, f"scan ({config.connectivity}-connected): {(time.perf_counter() - t1) * 1000:.1f} ms")
    return grid


def compute_cost(src, config=None):
    """Approximate squared distance to the nearest seed, int32 (h,w)."""
    return build_grid(src, config).interior_cost().copy()


def distance_field(src, config=None):
    """Compute the uint8 distance field of ``src``.

    Input:
        src: gray/BGR image array or sampled source (see ``as_intensity``)
        config: FieldConfig, defaults to threshold 128, scale 8, 4-connected
    Return:
        out: uint8 (h,w), 0 on seeds, growing with distance, saturating at 255
    Note:
        Distances are measured to the nearest seed only; seed pixels
        themselves are 0, there is no negative inside.
    """
    config = config or FieldConfig()
    grid = build_grid(src, config)
    cost = grid.interior_cost()
    out = np.empty(cost.shape, np.uint8)

    def extract(a, b):
        out[a:b] = cost_to_magnitude(cost[a:b], config.scale)

    t0 = time.perf_counter()
    parallel_rows(extract, cost.shape[0], config.num_workers)
    log(config, f"extract: {(time.perf_counter() - t0) * 1000:.1f} ms")
    return out
