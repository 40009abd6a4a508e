from dataclasses import dataclass
from datetime import date

import pytest

from jordan_aq.pipeline import AggregationPipeline


@dataclass(frozen=True)
class Scene:
    collection_id: str
    day: date
    values: dict  # city name -> value of the scene's single band


@dataclass(frozen=True)
class FakeImage:
    collection_id: str
    band: str
    scenes: tuple
    region: object


class FakeEngine:
    """In-memory RasterEngine. Scenes carry one value per city instead of pixels."""

    def __init__(self, scenes=()):
        self.scenes = list(scenes)
        self.calls = []
        self.exports = []

    def boundary(self, dataset_id, attribute, value):
        self.calls.append(("boundary", dataset_id, attribute, value))
        return ("region", value)

    def monthly_mean(self, collection_id, band, window, region):
        self.calls.append(("monthly_mean", collection_id, band, window))
        in_window = tuple(
            scene
            for scene in self.scenes
            if scene.collection_id == collection_id and window.start <= scene.day < window.end
        )
        return FakeImage(collection_id, band, in_window, region)

    def sample_means(self, image, band, locations, scale):
        self.calls.append(("sample_means", band, scale))
        means = []
        for location in locations:
            values = [scene.values[location.name] for scene in image.scenes if location.name in scene.values]
            means.append(sum(values) / len(values) if values else None)
        return means

    def start_export(self, image, region, job):
        self.exports.append((image, region, job))
        return f"TASK{len(self.exports)}"


NO2 = "COPERNICUS/S5P/OFFL/L3_NO2"
CITY_VALUES = {"Irbid": 1.0e-4, "Amman": 1.5e-4, "Zarqa": 1.2e-4, "Aqaba": 0.4e-4, "Mafraq": 0.6e-4}


@pytest.fixture
def scenes():
    return [
        Scene(NO2, date(2025, 1, 3), CITY_VALUES),
        Scene(NO2, date(2025, 1, 31), {name: value * 3 for name, value in CITY_VALUES.items()}),
        Scene(NO2, date(2025, 2, 1), {name: 1.0 for name in CITY_VALUES}),
        Scene(NO2, date(2024, 12, 31), {name: 1.0 for name in CITY_VALUES}),
        Scene("COPERNICUS/S5P/OFFL/L3_CO", date(2025, 1, 10), {name: 0.03 for name in CITY_VALUES}),
        Scene("COPERNICUS/S5P/OFFL/L3_SO2", date(2025, 12, 15), {"Aqaba": 2.0e-4}),
    ]


@pytest.fixture
def engine(scenes):
    return FakeEngine(scenes)


@pytest.fixture
def pipeline(engine):
    return AggregationPipeline(engine)
