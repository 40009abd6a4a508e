"""
Monthly Sentinel-5P air quality over Jordan, built on Google Earth Engine.
"""

__version__ = "0.1.0"

from jordan_aq.errors import AirQualityError, EngineUnavailableError, UnknownPollutantError
from jordan_aq.models import AggregationResult, CityMean, Pollutant, RasterHandle, SelectionState, TimeWindow
from jordan_aq.pipeline import AggregationPipeline, SelectionDispatcher, create_pipeline

__all__ = [
    "AggregationPipeline",
    "AggregationResult",
    "AirQualityError",
    "CityMean",
    "EngineUnavailableError",
    "Pollutant",
    "RasterHandle",
    "SelectionDispatcher",
    "SelectionState",
    "TimeWindow",
    "UnknownPollutantError",
    "create_pipeline",
]
