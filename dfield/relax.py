def relax(grid, x, y, ox, oy):
    """Relax padded cell (x, y) from its neighbor at (x + ox, y + oy).

    The neighbor's record is moved one step toward (x, y) and its cost is
    updated with (a + 1)^2 = a^2 + 2a + 1, per axis touched by the move.
    The target is replaced only when the candidate is strictly cheaper.
    """
    stride = grid.stride
    i = y * stride + x
    j = i + oy * stride + ox
    dx = int(grid.dx[j])
    dy = int(grid.dy[j])
    if oy == 0:
        f = int(grid.f[j]) + 2 * dx + 1
        dx += 1
    elif ox == 0:
        f = int(grid.f[j]) + 2 * dy + 1
        dy += 1
    else:
        f = int(grid.f[j]) + 2 * (dx + dy + 1)
        dx += 1
        dy += 1
    if f < grid.f[i]:
        grid.dx[i] = dx
        grid.dy[i] = dy
        grid.f[i] = f
        return True
    return False
