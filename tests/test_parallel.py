import numpy as np
import pytest
from dfield.parallel import row_bands, parallel_rows

def test_row_bands_cover_rows():
    bands = row_bands(10, 3)
    assert bands == [(0, 4), (4, 7), (7, 10)]
    assert row_bands(2, 8) == [(0, 1), (1, 2)]

def test_parallel_rows_fills_all():
    out = np.zeros(13, np.int32)

    def fn(a, b):
        out[a:b] = np.arange(a, b)

    parallel_rows(fn, 13, num_workers=4)
    assert np.array_equal(out, np.arange(13))

def test_parallel_rows_propagates_errors():
    def fn(a, b):
        raise RuntimeError("band failed")

    with pytest.raises(RuntimeError):
        parallel_rows(fn, 8, num_workers=2)
