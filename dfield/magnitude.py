import numpy as np


def cost_to_magnitude(cost, scale=8.0):
    """Map squared distances to uint8: round(sqrt(cost) * scale) clipped to [0,255]."""
    d = np.sqrt(np.asarray(cost, np.float64)) * scale
    return np.clip(np.rint(d), 0, 255).astype(np.uint8)
