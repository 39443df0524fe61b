import cv2
import numpy as np


def _sample(src):
    w, h = int(src.width), int(src.height)
    out = np.empty((h, w), np.float32)
    for y in range(h):
        for x in range(w):
            out[y, x] = src.intensity(x, y)
    return out


def as_intensity(src, channel=None):
    """Return a 2D intensity array for an image array or a sampled source.

    Args:
        src: (h,w) or (h,w,c) array, or an object with ``width``, ``height``
             and ``intensity(x, y)``
        channel: channel index for multi-channel arrays (0 or None for 2D);
                 None converts BGR/BGRA to gray
    """
    if not isinstance(src, np.ndarray) and hasattr(src, "intensity"):
        img = _sample(src)
    else:
        img = np.asarray(src)
    if img.ndim == 3:
        if channel is not None:
            if not 0 <= channel < img.shape[2]:
                raise ValueError(f"channel {channel} out of range for {img.shape[2]}-channel image")
            img = img[:, :, channel]
        elif img.shape[2] == 1:
            img = img[:, :, 0]
        else:
            if img.shape[2] not in (3, 4):
                raise ValueError(f"cannot convert {img.shape[2]}-channel image to gray; pass a channel index")
            if img.dtype not in (np.uint8, np.uint16, np.float32):
                raise ValueError(f"gray conversion needs uint8, uint16 or float32 input, got {img.dtype}; "
                                 "pass a channel index instead")
            code = cv2.COLOR_BGRA2GRAY if img.shape[2] == 4 else cv2.COLOR_BGR2GRAY
            img = cv2.cvtColor(img, code)
    elif img.ndim == 2:
        if channel not in (None, 0):
            raise ValueError(f"channel {channel} out of range for single-channel image")
    else:
        raise ValueError(f"expected a 2D or 3D image, got shape {img.shape}")
    if img.size == 0:
        raise ValueError("empty image")
    return img


def seed_mask(src, threshold=128, channel=None):
    """Boolean (h,w) mask, True where intensity > threshold."""
    return as_intensity(src, channel) > threshold
