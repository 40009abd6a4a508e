import logging

import geemap.foliumap as geemap

from jordan_aq.constants import Boundary_Color, Map_Basemap, Map_Center, Map_Zoom
from jordan_aq.models import get_pollutant_config

logger = logging.getLogger(__name__)


def create_pollution_map(raster, region):
    """
    Create the pollution map for a computed raster: hybrid basemap, Jordan borders in white,
    and the monthly mean layer styled with the pollutant's range and palette.
    """
    config = get_pollutant_config(raster.pollutant)

    Map = geemap.Map(center=list(Map_Center), zoom=Map_Zoom)
    Map.add_basemap(Map_Basemap)
    Map.addLayer(region, {"color": Boundary_Color}, "Jordan Boundary", True)
    Map.addLayer(raster.image, config.vis_params, config.label, True)
    return Map


def save_pollution_map(Map, raster) -> str:
    file_name = f"air_quality_{raster.pollutant.value}_{raster.window.start.isoformat()}.html"
    Map.save(file_name)
    logger.info("Saved map to %s", file_name)
    return file_name


def chart_title(pollutant) -> str:
    return f"Pollution Comparison ({get_pollutant_config(pollutant).unit})"


def insight_text(pollutant) -> str:
    return get_pollutant_config(pollutant).insight
