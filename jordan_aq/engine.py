"""
Raster engine adapter. The pipeline only talks to a ``RasterEngine``; the Earth Engine
backend is the production implementation.
"""
import logging
from typing import Any, Optional, Protocol, Sequence

import ee
import httplib2
from google.auth.exceptions import GoogleAuthError

from jordan_aq.errors import EngineUnavailableError
from jordan_aq.models import ExportJob, SampleLocation, TimeWindow

logger = logging.getLogger(__name__)

# ee only wraps HttpError; DNS and token failures arrive as httplib2 / google-auth errors.
ENGINE_ERRORS = (ee.EEException, httplib2.HttpLib2Error, GoogleAuthError, OSError)


class RasterEngine(Protocol):
    def boundary(self, dataset_id: str, attribute: str, value: str) -> Any:
        """Polygon collection of the features whose ``attribute`` equals ``value``."""

    def monthly_mean(self, collection_id: str, band: str, window: TimeWindow, region: Any) -> Any:
        """Lazy mean of ``band`` over every scene in ``window``, clipped to ``region``."""

    def sample_means(
        self, image: Any, band: str, locations: Sequence[SampleLocation], scale: int
    ) -> list[Optional[float]]:
        """Mean of ``band`` at each location, ``None`` where there is no data."""

    def start_export(self, image: Any, region: Any, job: ExportJob) -> str:
        """Queue an export and return its task id without waiting on it."""


class EarthEngineBackend:
    """RasterEngine backed by Google Earth Engine."""

    def __init__(self, project: Optional[str] = None):
        self.project = project

    def initialize(self):
        try:
            ee.Initialize(project=self.project)
        except Exception as e:
            raise EngineUnavailableError(f"Could not initialize Earth Engine: {e}") from e
        logger.info("Earth Engine initialized for project %s", self.project)
        return self

    def boundary(self, dataset_id, attribute, value):
        return ee.FeatureCollection(dataset_id).filter(ee.Filter.eq(attribute, value))

    def monthly_mean(self, collection_id, band, window, region):
        start_date, end_date = window.as_iso()
        # Selecting before mean() keeps an empty window a zero-band image instead of an error.
        return ee.ImageCollection(collection_id).filterDate(start_date, end_date).select(band).mean().clip(region)

    def sample_means(self, image, band, locations, scale):
        samples = ee.List(
            [
                image.reduceRegion(
                    reducer=ee.Reducer.mean(), geometry=ee.Geometry.Point(list(location.coordinates)), scale=scale
                )
                for location in locations
            ]
        )
        try:
            values = samples.getInfo()
        except ENGINE_ERRORS as e:
            raise EngineUnavailableError(f"Regional mean query failed: {e}") from e

        return [row.get(band) for row in values]

    def start_export(self, image, region, job):
        try:
            task = ee.batch.Export.image.toDrive(
                image=image,
                description=job.description,
                folder=job.folder,
                scale=job.scale,
                region=region.geometry().bounds(),
                fileFormat=job.file_format,
                maxPixels=job.max_pixels,
            )
            task.start()
        except ENGINE_ERRORS as e:
            raise EngineUnavailableError(f"Export submission failed: {e}") from e

        logger.info("Export task %s started: %s", task.id, job.description)
        return task.id
