"""Metre measurement parsing shared by the column detector and the row reducer."""

import re
import logging
from typing import Optional, Union

import pandas as pd


# A decimal number followed, possibly after whitespace, by a lowercase "m".
# This is the only numeric format recognised; other units never match.
# Digits are ASCII only, whitespace includes non-breaking spaces (&nbsp;).
MEASUREMENT_PATTERN = re.compile(r'([0-9]+(\.[0-9]+)?)\s*m')


def extract_measurement(value: Union[str, float, None]) -> Optional[str]:
    """Return the number text of the first metre measurement in ``value``.
    
    >>> extract_measurement("The length is 12.5 m")
    '12.5'
    >>> extract_measurement("12.5") is None
    True
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    
    match = MEASUREMENT_PATTERN.search(str(value))
    return match.group(1) if match else None


class MeasurementParser:
    """Turns cell texts into metre values."""
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
    
    def is_measurement(self, value: Optional[str]) -> bool:
        """Check whether a cell text carries a metre measurement."""
        return extract_measurement(value) is not None
    
    def parse_measurement(self, value: Optional[str]) -> Optional[Union[int, float]]:
        """Parse the first metre measurement in a cell text.
        
        Args:
            value: Cell text, or None for a missing cell
            
        Returns:
            Measurement, as int when integral, or None if the text has no measurement
        """
        number = extract_measurement(value)
        if number is None:
            self.logger.debug(f"No measurement in value {value!r}")
            return None
        
        measurement = float(number)
        return int(measurement) if measurement.is_integer() else measurement
