"""Miscellaneous and utility functions"""

__all__ = ['clamp_value', 'to_percent']

from typing import Optional

from .types import Nb


def clamp_value(val: Nb, min_val: Nb, max_val: Nb) -> Nb:
    """
    Clamp value val between min_val and max_val

    :param val:         Value to clamp
    :param min_val:     Minimum value
    :param max_val:     Maximum value
    :return:            Clamped value
    """
    return min_val if val < min_val else max_val if val > max_val else val  # type: ignore


def to_percent(val: Optional[float]) -> str:
    """
    Format a normalised value as a whole percentage, without the sign

    :param val:         Value in the range 0.0 - 1.0 or None
    :return:            Rounded percentage, empty string if val is None
    """
    if val is None:
        return ''
    return str(round(val * 100))
