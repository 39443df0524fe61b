import numpy as np
import pytest
from dfield import FieldConfig, distance_field, compute_cost

def test_seed_pixels_are_zero():
    rng = np.random.default_rng(3)
    img = ((rng.random((16, 16)) < 0.1) * 255).astype(np.uint8)
    out = distance_field(img)
    assert out.dtype == np.uint8 and out.shape == img.shape
    assert np.all(out[img > 128] == 0)
    assert np.all(out[img <= 128] > 0)

def test_single_seed_magnitudes():
    img = np.zeros((5, 5), np.uint8)
    img[2, 2] = 200
    out = distance_field(img, FieldConfig(scale=8))
    assert out[2, 2] == 0
    assert out[2, 1] == 8 and out[2, 3] == 8 and out[1, 2] == 8 and out[3, 2] == 8
    assert out[1, 1] == 11 and out[3, 3] == 11
    assert out[2, 0] == 16
    assert out[0, 0] == 23

def test_all_seed_is_zero():
    out = distance_field(np.full((3, 3), 255, np.uint8))
    assert np.all(out == 0)

def test_no_seed_saturates():
    img = np.zeros((4, 4), np.uint8)
    out = distance_field(img)
    assert np.all(out == 255)
    assert np.all(compute_cost(img) == 1073741823)

def test_threshold_is_strict():
    img = np.array([[128, 129]], np.uint8)
    out = distance_field(img)
    assert out[0, 1] == 0 and out[0, 0] == 8
    out = distance_field(img, FieldConfig(threshold=10))
    assert np.all(out == 0)

def test_deterministic():
    rng = np.random.default_rng(11)
    img = ((rng.random((40, 33)) < 0.05) * 255).astype(np.uint8)
    a = distance_field(img)
    b = distance_field(img)
    assert np.array_equal(a, b)

@pytest.mark.parametrize("conn", [4, 8])
def test_workers_match_inline(conn):
    rng = np.random.default_rng(5)
    img = ((rng.random((37, 21)) < 0.05) * 255).astype(np.uint8)
    a = distance_field(img, FieldConfig(connectivity=conn))
    b = distance_field(img, FieldConfig(connectivity=conn, num_workers=4))
    assert np.array_equal(a, b)

def test_scale_saturation():
    img = np.zeros((1, 40), np.uint8)
    img[0, 0] = 255
    out = distance_field(img, FieldConfig(scale=8))
    assert out[0, 31] == 248
    assert out[0, 32] == 255 and out[0, 39] == 255

def test_color_and_channel_input():
    bgr = np.zeros((5, 5, 3), np.uint8)
    bgr[2, 2] = (255, 255, 255)
    bgr[0, 0] = (255, 0, 0)  # bright only in blue
    gray = distance_field(bgr)
    assert gray[2, 2] == 0 and gray[0, 0] > 0
    blue = distance_field(bgr, FieldConfig(channel=0))
    assert blue[0, 0] == 0 and blue[2, 2] == 0

class _Checker:
    width, height = 4, 3

    def intensity(self, x, y):
        return 255 if (x, y) == (3, 0) else 0

def test_sampled_source():
    out = distance_field(_Checker())
    assert out.shape == (3, 4)
    assert out[0, 3] == 0 and out[0, 2] == 8 and out[1, 3] == 8

def test_verbose_prints(capsys):
    distance_field(np.full((2, 2), 255, np.uint8), FieldConfig(verbose=True))
    assert "[DF]" in capsys.readouterr().out

@pytest.mark.parametrize("kwargs", [
    dict(connectivity=6), dict(scale=0), dict(scale=-1), dict(num_workers=-2)])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        FieldConfig(**kwargs)

def test_bad_inputs():
    with pytest.raises(ValueError):
        distance_field(np.zeros((2, 2, 2, 2), np.uint8))
    with pytest.raises(ValueError):
        distance_field(np.zeros((0, 3), np.uint8))
    with pytest.raises(ValueError):
        distance_field(np.zeros((3, 3, 3), np.uint8), FieldConfig(channel=3))

def test_config_from_dict_ignores_unknown():
    cfg = FieldConfig.from_dict({"scale": 4, "image": "x.png", "channel": None})
    assert cfg.scale == 4 and cfg.channel is None and cfg.connectivity == 4

def test_channel_rejected_for_gray_input():
    img = np.zeros((3, 3), np.uint8)
    assert distance_field(img, FieldConfig(channel=0)).shape == (3, 3)
    with pytest.raises(ValueError):
        distance_field(img, FieldConfig(channel=2))

def test_gray_conversion_rejects_unsupported_dtype():
    img = np.zeros((3, 3, 3), np.int64)
    with pytest.raises(ValueError):
        distance_field(img)
    img[1, 1, 2] = 255
    out = distance_field(img, FieldConfig(channel=2))
    assert out[1, 1] == 0

def test_gray_conversion_rejects_two_channels():
    with pytest.raises(ValueError):
        distance_field(np.zeros((3, 3, 2), np.uint8))
