import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from jordan_aq.constants import Boundary_Attribute, Boundary_Dataset, Boundary_Value
from jordan_aq.engine import EarthEngineBackend
from jordan_aq.export import submit_export
from jordan_aq.models import (
    SAMPLE_LOCATIONS,
    AggregationResult,
    CityMean,
    RasterHandle,
    SelectionState,
    TimeWindow,
    get_pollutant_config,
)
from jordan_aq.settings import EXPORT_FOLDER, GEE_PROJECT, SAMPLE_SCALE

logger = logging.getLogger(__name__)


class AggregationPipeline:
    """
    Monthly mean of a Sentinel-5P band over Jordan, sampled at a fixed set of cities.

    Every call is independent. The only shared state is the Jordan boundary, looked up
    once and read-only afterwards.
    """

    def __init__(self, engine, sample_scale: int = SAMPLE_SCALE, locations=SAMPLE_LOCATIONS):
        self.engine = engine
        self.sample_scale = sample_scale
        self.locations = tuple(locations)
        self._region = None
        self._region_lock = threading.Lock()

    @property
    def region(self):
        with self._region_lock:
            if self._region is None:
                self._region = self.engine.boundary(Boundary_Dataset, Boundary_Attribute, Boundary_Value)
        return self._region

    def compute(self, pollutant, year: int, month: int):
        """
        Returns (RasterHandle, AggregationResult). A month without scenes gives None for
        every city rather than an error.
        """
        config = get_pollutant_config(pollutant)
        window = TimeWindow(year, month)
        start_date, end_date = window.as_iso()
        logger.info("Computing %s mean for %s to %s", config.pollutant.value, start_date, end_date)

        image = self.engine.monthly_mean(config.collection_id, config.band, window, self.region)
        raster = RasterHandle(image=image, pollutant=config.pollutant, window=window, band=config.band)

        values = self.engine.sample_means(image, config.band, self.locations, self.sample_scale)
        result = AggregationResult(
            tuple(
                CityMean(location.name, None if value is None else float(value))
                for location, value in zip(self.locations, values, strict=True)
            )
        )
        if not result.has_data:
            logger.warning("No %s observations for %s", config.pollutant.value, start_date[:7])

        return raster, result

    def on_selection_changed(self, state: SelectionState):
        return self.compute(state.pollutant, state.year, state.month)

    def export(self, raster: RasterHandle, folder=EXPORT_FOLDER) -> str:
        config = get_pollutant_config(raster.pollutant)
        return submit_export(
            self.engine, raster, self.region, config.label, raster.window.year, raster.window.month, folder=folder
        )


def create_pipeline(project=GEE_PROJECT, sample_scale: int = SAMPLE_SCALE) -> AggregationPipeline:
    engine = EarthEngineBackend(project=project).initialize()
    return AggregationPipeline(engine, sample_scale=sample_scale)


class SelectionDispatcher:
    """
    Runs recomputations off the caller's thread. A newer selection supersedes older ones:
    queued work is cancelled and in-flight work is left to finish but its result is dropped.
    Exports run on their own executor so they never wait on, or hold up, a recomputation.

    The dashboard only uses the export lane since streamlit already reruns the script per
    widget change; front ends with their own event loop submit selections here as well.
    Callbacks run under the dispatcher lock, so a ``submit`` from another thread waits
    until a delivery in progress has finished.
    """

    def __init__(self, pipeline: AggregationPipeline, on_result=None, on_error=None, max_workers: int = 2):
        self.pipeline = pipeline
        self.on_result = on_result
        self.on_error = on_error
        self._compute_pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="aq-compute")
        self._export_pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="aq-export")
        self._lock = threading.RLock()
        self._generation = 0
        self._latest = None

    @property
    def latest(self):
        return self._latest

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def submit(self, state: SelectionState):
        with self._lock:
            self._generation += 1
            generation = self._generation
            if self._latest is not None:
                self._latest.cancel()
            self._latest = self._compute_pool.submit(self._run, generation, state)
            return self._latest

    def _run(self, generation: int, state: SelectionState):
        if not self.is_current(generation):
            return None
        try:
            outcome = self.pipeline.on_selection_changed(state)
        except Exception as e:
            with self._lock:
                if generation == self._generation and self.on_error is not None:
                    self.on_error(state, e)
            raise

        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping superseded result for %s", state)
                return None
            if self.on_result is not None:
                self.on_result(state, *outcome)
        return outcome

    def export(self, raster: RasterHandle, folder=EXPORT_FOLDER):
        future = self._export_pool.submit(self.pipeline.export, raster, folder)
        future.add_done_callback(_log_export_failure)
        return future

    def shutdown(self, wait: bool = True):
        self._compute_pool.shutdown(wait=wait, cancel_futures=True)
        self._export_pool.shutdown(wait=wait)


def _log_export_failure(future):
    if not future.cancelled() and future.exception() is not None:
        logger.error("Export submission failed: %s", future.exception())
