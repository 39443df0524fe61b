from concurrent.futures import ThreadPoolExecutor


def row_bands(n_rows, num_workers):
    """Split [0, n_rows) into at most num_workers contiguous (start, stop) bands."""
    n = max(1, min(int(num_workers), n_rows))
    step, extra = divmod(n_rows, n)
    bands = []
    start = 0
    for k in range(n):
        stop = start + step + (1 if k < extra else 0)
        if stop > start:
            bands.append((start, stop))
        start = stop
    return bands


def parallel_rows(fn, n_rows, num_workers=None):
    """Call fn(start, stop) over disjoint row bands.

    Only for stages where no row reads another row's output (seeding,
    extraction, the brute-force oracle). Runs inline when num_workers is
    None, 0 or 1. Exceptions raised in a worker re-raise here.
    """
    if not num_workers or num_workers <= 1 or n_rows < 2:
        fn(0, n_rows)
        return
    bands = row_bands(n_rows, num_workers)
    with ThreadPoolExecutor(max_workers=len(bands)) as ex:
        futures = [ex.submit(fn, a, b) for a, b in bands]
        for fut in futures:
            fut.result()
