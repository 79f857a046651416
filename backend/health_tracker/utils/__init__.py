"""Utility functions and helpers for the health tracker application."""

from .unit_conversion import (
    convert_weight,
    convert_waist,
    convert_weight_to_standard,
    convert_waist_to_standard,
    round_measurement
)

__all__ = [
    'convert_weight',
    'convert_waist',
    'convert_weight_to_standard',
    'convert_waist_to_standard',
    'round_measurement'
]
