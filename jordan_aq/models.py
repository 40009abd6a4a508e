from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

from jordan_aq.constants import CITIES, POLLUTANTS
from jordan_aq.errors import InvalidSelectionError, UnknownPollutantError


class Pollutant(str, Enum):
    NO2 = "NO2"
    SO2 = "SO2"
    CO = "CO"
    AEROSOL_INDEX = "AerosolIndex"

    @classmethod
    def parse(cls, value) -> "Pollutant":
        """Accepts a Pollutant or its string id, raises UnknownPollutantError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownPollutantError(value) from None


@dataclass(frozen=True)
class PollutantConfig:
    pollutant: Pollutant
    label: str
    collection_id: str
    band: str
    value_range: tuple
    unit: str
    palette: tuple
    insight: str

    @property
    def vis_params(self) -> dict:
        return {"min": self.value_range[0], "max": self.value_range[1], "palette": list(self.palette)}


def _build_configs():
    configs = {}
    for pollutant in Pollutant:
        entry = POLLUTANTS[pollutant.value]
        configs[pollutant] = PollutantConfig(
            pollutant=pollutant,
            label=entry["label"],
            collection_id=entry["collection"],
            band=entry["band"],
            value_range=(entry["min"], entry["max"]),
            unit=entry["unit"],
            palette=tuple(entry["palette"]),
            insight=entry["insight"],
        )
    return configs


POLLUTANT_CONFIGS = _build_configs()


def get_pollutant_config(pollutant) -> PollutantConfig:
    return POLLUTANT_CONFIGS[Pollutant.parse(pollutant)]


@dataclass(frozen=True)
class TimeWindow:
    """
    Half-open monthly window [start, end). The end is one calendar month after the
    start, so December rolls over into January of the following year.
    """

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidSelectionError(f"Month must be between 1 and 12, got {self.month}")

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return self.start + relativedelta(months=1)

    def as_iso(self) -> tuple:
        return self.start.isoformat(), self.end.isoformat()


@dataclass(frozen=True)
class SampleLocation:
    name: str
    coordinates: tuple  # lon, lat


SAMPLE_LOCATIONS = tuple(SampleLocation(name, coords) for name, coords in CITIES)


@dataclass(frozen=True)
class SelectionState:
    pollutant: Pollutant
    year: int
    month: int

    @classmethod
    def create(cls, pollutant, year: int, month: int) -> "SelectionState":
        return cls(Pollutant.parse(pollutant), int(year), int(month))


@dataclass(frozen=True)
class RasterHandle:
    """
    Lazy single-band raster returned by the engine. ``image`` is whatever the engine
    hands back (an ``ee.Image`` for Earth Engine) and is only evaluated when it is
    rendered or exported.
    """

    image: Any
    pollutant: Pollutant
    window: TimeWindow
    band: str


@dataclass(frozen=True)
class CityMean:
    location: str
    mean_value: Optional[float]


@dataclass(frozen=True)
class AggregationResult:
    entries: tuple

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    @property
    def has_data(self) -> bool:
        return any(entry.mean_value is not None for entry in self.entries)

    def as_dict(self) -> dict:
        return {entry.location: entry.mean_value for entry in self.entries}

    def to_frame(self) -> pd.DataFrame:
        """City/Pollution frame in location order, missing samples as NaN."""
        return pd.DataFrame(
            {
                "City": [entry.location for entry in self.entries],
                "Pollution": pd.Series([entry.mean_value for entry in self.entries], dtype="float64"),
            }
        )


@dataclass(frozen=True)
class ExportJob:
    description: str
    scale: int
    max_pixels: float
    file_format: str
    folder: Optional[str] = None
