from .relax import relax

# Neighbor offsets per sweep, in relaxation order.
FORWARD_LR_4 = ((0, -1), (-1, 0))
FORWARD_RL_4 = ((1, 0),)
BACKWARD_LR_4 = ((0, 1), (-1, 0))
BACKWARD_RL_4 = ((1, 0),)

FORWARD_LR_8 = ((0, -1), (-1, 0), (-1, -1))
FORWARD_RL_8 = ((1, 0), (1, -1))
BACKWARD_LR_8 = ((0, 1), (-1, 0), (-1, 1))
BACKWARD_RL_8 = ((1, 0), (1, 1))


def _sweep(grid, y, xs, offsets):
    for x in xs:
        for ox, oy in offsets:
            relax(grid, x, y, ox, oy)


def _two_pass(grid, fwd_lr, fwd_rl, bwd_lr, bwd_rl):
    w, h = grid.w, grid.h
    assert grid.border_is_far(), "border ring must hold FAR before scanning"
    # forward: top to bottom
    for y in range(1, h + 1):
        _sweep(grid, y, range(1, w + 1), fwd_lr)
        _sweep(grid, y, range(w - 1, 0, -1), fwd_rl)
    # backward: bottom to top, last row is already final
    for y in range(h - 1, 0, -1):
        _sweep(grid, y, range(1, w + 1), bwd_lr)
        _sweep(grid, y, range(w - 1, 0, -1), bwd_rl)


def scan_4sed(grid):
    """4-connected two-pass propagation (axis neighbors only)."""
    _two_pass(grid, FORWARD_LR_4, FORWARD_RL_4, BACKWARD_LR_4, BACKWARD_RL_4)


def scan_8sed(grid):
    """8-connected two-pass propagation (axis and diagonal neighbors)."""
    _two_pass(grid, FORWARD_LR_8, FORWARD_RL_8, BACKWARD_LR_8, BACKWARD_RL_8)


def run_scan(grid, connectivity=4):
    if connectivity == 4:
        scan_4sed(grid)
    elif connectivity == 8:
        scan_8sed(grid)
    else:
        raise ValueError(f"connectivity must be 4 or 8, got {connectivity}")
