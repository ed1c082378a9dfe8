import pytest_check as check
from colourconv import HSL, HSV, RGB


def test_init() -> None:
    hsl = HSL(200.7, 0.5, 1)
    check.equal(tuple(hsl), (200, 0.5, 1.0))
    check.is_instance(hsl.h, int)


def test_init_rejects_out_of_range() -> None:
    check.is_none(HSL(360, 0, 0).h)
    check.is_none(HSL(-1, 0, 0).h)
    check.is_none(HSL(0, 1.1, 0).s)
    check.is_none(HSL(0, 0, -0.1).l)
    check.equal(HSL(359, 0, 0).h, 359)


def test_sectors() -> None:
    expected = {
        0: RGB(255, 0, 0),
        30: RGB(255, 128, 0),
        60: RGB(255, 255, 0),
        120: RGB(0, 255, 0),
        180: RGB(0, 255, 255),
        240: RGB(0, 0, 255),
        300: RGB(255, 0, 255),
        359: RGB(255, 0, 4),
    }
    for h, rgb in expected.items():
        check.equal(HSL(h, 1, 0.5).to_rgb(), rgb, msg=f'h={h}')


def test_achromatic() -> None:
    check.equal(HSL(0, 0, 0.5).to_rgb(), RGB(128, 128, 128))
    check.equal(HSL(123, 0.8, 0).to_rgb(), RGB(0, 0, 0))
    check.equal(HSL(123, 0.8, 1).to_rgb(), RGB(255, 255, 255))


def test_rgb_round_trip() -> None:
    for rgb in (RGB(255, 0, 0), RGB(10, 20, 30), RGB(128, 128, 128), RGB(0, 0, 0), RGB(255, 255, 255)):
        check.equal(rgb.to_hsl().to_rgb(), rgb)


def test_to_hsv() -> None:
    check.equal(HSL(0, 1, 0.5).to_hsv(), HSV(0, 1, 1))


def test_incomplete_to_rgb() -> None:
    check.equal(HSL(0, None, 0.5).to_rgb(), RGB())


def test_to_hsl_is_a_copy() -> None:
    hsl = HSL(10, 0.2, 0.3)
    copy = hsl.to_hsl()
    check.equal(copy, hsl)
    check.is_not(copy, hsl)


def test_str() -> None:
    check.equal(str(HSL(0, 1, 0.5)), '0, 100%, 50%')
    check.equal(HSL(0, 1, 0.5).to_css(), 'hsl(0, 100%, 50%)')
