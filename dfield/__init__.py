# dfield - linear-time distance fields for glyph/icon/sprite textures
from .config import FieldConfig
from .grid import PaddedGrid, SEED, FAR, FAR_COST
from .relax import relax
from .scan import scan_4sed, scan_8sed, run_scan
from .magnitude import cost_to_magnitude
from .field import build_grid, compute_cost, distance_field
from .oracle import seed_coords, bruteforce_cost, bruteforce_field
from .compare import compare_with_oracle
from .visualize import colorize_field, error_map
