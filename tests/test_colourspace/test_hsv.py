import pytest_check as check
from colourconv import CMYK, HSL, HSV, RGB, Hex


def test_init_rejects_out_of_range() -> None:
    hsv = HSV(400, 2, -1)
    check.equal(tuple(hsv), (None, None, None))


def test_black_for_any_hue() -> None:
    check.equal(HSV(0, 0, 0).to_rgb(), RGB(0, 0, 0))
    check.equal(HSV(123, 0.7, 0).to_rgb(), RGB(0, 0, 0))


def test_to_rgb() -> None:
    check.equal(HSV(0, 0, 1).to_rgb(), RGB(255, 255, 255))
    check.equal(HSV(240, 1, 1).to_rgb(), RGB(0, 0, 255))
    check.equal(HSV(120, 1, 0.5).to_rgb(), RGB(0, 128, 0))
    check.equal(HSV(60, 1, 1).to_rgb(), RGB(255, 255, 0))


def test_sector_edges() -> None:
    check.equal(HSV(0, 1, 1).to_rgb(), RGB(255, 0, 0))
    check.equal(HSV(120, 1, 1).to_rgb(), RGB(0, 255, 0))
    check.equal(HSV(240, 1, 1).to_rgb(), RGB(0, 0, 255))


def test_to_other_models() -> None:
    check.equal(HSV(0, 1, 1).to_cmyk(), CMYK(0, 1, 1, 0))
    check.equal(HSV(0, 1, 1).to_hex(), Hex('ff', '00', '00'))
    check.equal(HSV(0, 1, 1).to_hsl(), HSL(0, 1, 0.5))


def test_rgb_round_trip() -> None:
    for rgb in (RGB(255, 0, 0), RGB(10, 20, 30), RGB(128, 128, 128), RGB(0, 0, 0)):
        check.equal(rgb.to_hsv().to_rgb(), rgb)


def test_to_hsv_is_a_copy() -> None:
    hsv = HSV(10, 0.2, 0.3)
    copy = hsv.to_hsv()
    check.equal(copy, hsv)
    check.is_not(copy, hsv)


def test_str() -> None:
    check.equal(str(HSV(0, 1, 1)), '0, 100%, 100%')
    check.equal(HSV(0, 1, 1).to_css(), 'hsv(0, 100%, 100%)')
