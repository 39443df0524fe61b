import cv2
import numpy as np


def colorize_field(field):
    """JET-colored BGR preview of a uint8 distance field."""
    f = np.asarray(field)
    if f.dtype != np.uint8:
        f = np.clip(f, 0, 255).astype(np.uint8)
    return cv2.applyColorMap(f, cv2.COLORMAP_JET)


def error_map(fast_cost, exact_cost, scale=8.0):
    """uint8 map of |sqrt(fast) - sqrt(exact)| * scale, clipped to 255."""
    a = np.sqrt(np.asarray(fast_cost, np.float64))
    b = np.sqrt(np.asarray(exact_cost, np.float64))
    return np.clip(np.abs(a - b) * scale, 0, 255).astype(np.uint8)
