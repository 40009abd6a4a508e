import logging

from jordan_aq.constants import Export_Format, Export_Max_Pixels, Export_Prefix, Export_Scale
from jordan_aq.models import ExportJob

logger = logging.getLogger(__name__)


def export_description(label: str, year: int, month: int) -> str:
    """Task name from the first word of the pollutant label, ex: Jordan_AQ_Nitrogen_2025_1."""
    return f"{Export_Prefix}_{label.split(' ')[0]}_{year}_{month}"


def build_export_job(label: str, year: int, month: int, folder=None) -> ExportJob:
    return ExportJob(
        description=export_description(label, year, month),
        scale=Export_Scale,
        max_pixels=Export_Max_Pixels,
        file_format=Export_Format,
        folder=folder,
    )


def submit_export(engine, raster, region, label: str, year: int, month: int, folder=None) -> str:
    """
    Queue a GeoTIFF export of the raster bounded to the region. Fire and forget: the task id
    is returned as soon as the engine accepts it, completion is never polled.
    """
    job = build_export_job(label, year, month, folder=folder)
    task_id = engine.start_export(raster.image, region, job)
    logger.info("Queued export %s as task %s", job.description, task_id)
    return task_id
