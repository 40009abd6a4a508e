"""
Runtime settings read from the environment or a local .env file.
"""
import logging

from decouple import config

from jordan_aq.constants import Sample_Scale

GEE_PROJECT = config("GEE_PROJECT", default=None)
SAMPLE_SCALE = config("AQ_SAMPLE_SCALE", default=Sample_Scale, cast=int)
EXPORT_FOLDER = config("AQ_EXPORT_FOLDER", default=None)
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL):
    """Set up root logging and quiet the chatty Google client loggers."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    logging.getLogger("googleapiclient").setLevel(logging.ERROR)
    logging.getLogger("googleapiclient.discovery").setLevel(logging.ERROR)
    logging.getLogger("google.auth").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
