from typing import List

import pytest
import pytest_check as check
from colourconv import HSL, RGB, ComponentValueError, Hex, Policy


def test_init_pads_and_lowers() -> None:
    hexa = Hex('F', '8', 'aB')
    check.equal(tuple(hexa), ('0f', '08', 'ab'))


def test_init_rejects_malformed() -> None:
    hexa = Hex('fff', 'zz', '')
    check.equal(tuple(hexa), (None, None, None))
    check.is_none(Hex(12).r)
    check.is_none(Hex('#f').r)


def test_rejected_value_keeps_previous() -> None:
    hexa = Hex('ff', '00', '00')
    hexa.r = 'g0'
    hexa.g = 255
    check.equal(hexa, Hex('ff', '00', '00'))


def test_to_rgb() -> None:
    check.equal(Hex('ff', '00', '00').to_rgb(), RGB(255, 0, 0))
    check.equal(Hex('0a', '80', 'FF').to_rgb(), RGB(10, 128, 255))
    check.equal(Hex('ff', None, '00').to_rgb(), RGB(255, None, 0))


def test_to_hsl_through_rgb() -> None:
    check.equal(Hex('00', 'ff', '00').to_hsl(), HSL(120, 1, 0.5))


def test_hex_property() -> None:
    hexa = Hex('ff', '80', '00')
    check.equal(hexa.hex, 'ff8000')
    hexa.b = None
    check.equal(hexa.hex, 'ff80')


def test_hex_setter() -> None:
    hexa = Hex()
    hexa.hex = '#00FF7f'
    check.equal(tuple(hexa), ('00', 'ff', '7f'))
    hexa.hex = 'ff8'
    check.equal(tuple(hexa), ('ff', '08', None))
    hexa.hex = ''
    check.equal(tuple(hexa), (None, None, None))


def test_hex_setter_events() -> None:
    events: List[str] = []
    hexa = Hex(on_change=events.append)
    hexa.hex = 'ff8000'
    check.equal(events, ['r', 'g', 'b', 'hex'])


def test_hex_setter_rejects_non_string() -> None:
    events: List[str] = []
    hexa = Hex('01', '02', '03', on_change=events.append)
    hexa.hex = 0xff8000  # type: ignore[assignment]
    check.equal(hexa.hex, '010203')
    check.equal(events, ['hex'])


def test_from_string() -> None:
    events: List[str] = []
    hexa = Hex.from_string('#ff8000', on_change=events.append)
    check.equal(hexa.to_rgb(), RGB(255, 128, 0))
    check.equal(events, [])
    hexa.r = '00'
    check.equal(events, ['r'])


def test_to_hex_is_a_copy() -> None:
    hexa = Hex('12', '34', '56')
    copy = hexa.to_hex()
    check.equal(copy, hexa)
    check.is_not(copy, hexa)


def test_str() -> None:
    check.equal(str(Hex('ff', '80', '00')), 'ff8000')
    check.equal(Hex('ff', '80', '00').to_css(), '#ff8000')


def test_hex_setter_rejects_malformed_string() -> None:
    events: List[str] = []
    hexa = Hex('01', '02', '03', on_change=events.append)
    hexa.hex = 'zz0000'
    check.equal(tuple(hexa), ('01', '02', '03'))
    hexa.hex = 'ff00ff00'
    check.equal(tuple(hexa), ('01', '02', '03'))
    hexa.hex = '##ff0000'
    check.equal(tuple(hexa), ('01', '02', '03'))
    check.equal(events, ['hex', 'hex', 'hex'])


def test_hex_setter_malformed_string_policies() -> None:
    hexa = Hex('01', '02', '03', notify_rejected=False, policy=Policy.CLAMP)
    hexa.hex = 'ff00ff00'
    check.equal(hexa.hex, '010203')
    strict = Hex('01', '02', '03', policy=Policy.RAISE)
    with pytest.raises(ComponentValueError) as excinfo:
        strict.hex = '0g0000'
    check.equal(excinfo.value.field, 'hex')
    check.equal(strict.hex, '010203')
    with pytest.raises(ComponentValueError):
        Hex.from_string('#1234567', policy=Policy.RAISE)
    check.equal(tuple(Hex.from_string('#1234567')), (None, None, None))
