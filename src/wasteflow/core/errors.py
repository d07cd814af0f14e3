"""
Exception hierarchy for wasteflow.

Library code raises these; the CLI catches `WasteflowError` once per command.
"""

from pathlib import Path
from typing import Optional


class WasteflowError(Exception):
    """Base class for all wasteflow errors."""


class ConfigError(WasteflowError):
    """The project configuration file could not be read or validated."""


class DatasetError(WasteflowError):
    """The dataset could not be loaded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class DatasetNotFoundError(DatasetError):
    """The dataset file does not exist."""


class DatasetFormatError(DatasetError):
    """The dataset is not a JSON array of valid waste records."""


class ResidualError(WasteflowError):
    """
    Raised in reject mode when incinerated + recycled exceeds generated.
    """

    def __init__(self, country: str, year: int, value: float):
        super().__init__(
            f"Negative environmental load for {country} in {year}: {value}"
        )
        self.country = country
        self.year = year
        self.value = value
