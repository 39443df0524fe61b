import numpy as np

INT16_MAX = int(np.iinfo(np.int16).max)
INT32_MAX = int(np.iinfo(np.int32).max)

# Half of int32 max: a far record plus one relaxation step (at most
# 2 * (INT16_MAX + INT16_MAX + 1)) must still fit in int32.
FAR_COST = INT32_MAX // 2

# (dx, dy, f) with f == dx*dx + dy*dy
SEED = (0, 0, 0)
FAR = (INT16_MAX, INT16_MAX, FAR_COST)


class PaddedGrid:
    """Distance records for a w x h image plus a one-cell border ring.

    Records are stored in three flat arrays (dx, dy as int16, f as int32)
    with row stride ``width + 2``. Interior pixel (x, y) lives at padded
    coordinates (x + 1, y + 1); the border ring holds FAR and is never
    written after ``fill_border``.
    """

    def __init__(self, width, height):
        self.w = int(width)
        self.h = int(height)
        self.stride = self.w + 2
        n = self.stride * (self.h + 2)
        self.dx = np.empty(n, np.int16)
        self.dy = np.empty(n, np.int16)
        self.f = np.empty(n, np.int32)

    def index(self, x, y):
        assert 0 <= x < self.stride, f"x={x} outside padded width {self.stride}"
        assert 0 <= y < self.h + 2, f"y={y} outside padded height {self.h + 2}"
        return y * self.stride + x

    def get(self, x, y):
        i = self.index(x, y)
        return int(self.dx[i]), int(self.dy[i]), int(self.f[i])

    def put(self, x, y, rec):
        i = self.index(x, y)
        self.dx[i], self.dy[i], self.f[i] = rec

    def _planes(self):
        shape = (self.h + 2, self.stride)
        return self.dx.reshape(shape), self.dy.reshape(shape), self.f.reshape(shape)

    def fill_border(self):
        for plane, value in zip(self._planes(), FAR):
            plane[0, :] = value
            plane[-1, :] = value
            plane[:, 0] = value
            plane[:, -1] = value

    def fill_rows(self, seeds, start, stop):
        """Seed interior image rows [start, stop) from a boolean (h, w) mask."""
        rows = seeds[start:stop]
        for plane, seed_val, far_val in zip(self._planes(), SEED, FAR):
            plane[start + 1:stop + 1, 1:-1] = np.where(rows, seed_val, far_val)

    def interior_cost(self):
        return self.f.reshape(self.h + 2, self.stride)[1:-1, 1:-1]

    def interior_offsets(self):
        dx, dy, _ = self._planes()
        return dx[1:-1, 1:-1], dy[1:-1, 1:-1]

    def border_is_far(self):
        for plane, value in zip(self._planes(), FAR):
            ring = np.concatenate([plane[0, :], plane[-1, :], plane[:, 0], plane[:, -1]])
            if not np.all(ring == value):
                return False
        return True

    def check_invariant(self):
        """True when every reached record satisfies f == dx*dx + dy*dy.

        Cells still holding the FAR sentinel are skipped: its cost is
        deliberately below dx*dx + dy*dy.
        """
        dx = self.dx.astype(np.int64)
        dy = self.dy.astype(np.int64)
        f = self.f.astype(np.int64)
        reached = f != FAR_COST
        return bool(np.all(f[reached] == (dx * dx + dy * dy)[reached]))
