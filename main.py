import argparse
import logging
import sys

from jordan_aq.constants import Default_Month, Default_Pollutant, Default_Year
from jordan_aq.create_map import chart_title, create_pollution_map, insight_text, save_pollution_map
from jordan_aq.errors import AirQualityError
from jordan_aq.models import Pollutant, SelectionState
from jordan_aq.pipeline import create_pipeline
from jordan_aq.settings import configure_logging

logger = logging.getLogger("jordan_aq")


def print_report(state: SelectionState, result):
    print(chart_title(state.pollutant))
    for entry in result:
        value = "no data" if entry.mean_value is None else f"{entry.mean_value:.6g}"
        print(f"  {entry.location:<8} {value}")
    print(insight_text(state.pollutant))


def run(state: SelectionState, task: str):
    """
    Cases: Report, Heat Map, Export
    """
    pipeline = create_pipeline()
    raster, result = pipeline.on_selection_changed(state)

    match task:
        case "Report":
            print_report(state, result)

        case "Heat Map":
            print_report(state, result)
            Map = create_pollution_map(raster, pipeline.region)
            save_pollution_map(Map, raster)

        case "Export":
            task_id = pipeline.export(raster)
            print(f"🚀 Task {task_id} started: check the Tasks tab in the Earth Engine console.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Monthly Sentinel-5P air quality for Jordanian cities.")
    parser.add_argument(
        "-p",
        "--pollutant",
        choices=[p.value for p in Pollutant],
        help="Pollutant to analyse.",
        default=Default_Pollutant,
    )
    parser.add_argument("-y", "--year", type=int, help="Year to analyse, ex: 2025.", default=Default_Year)
    parser.add_argument("-m", "--month", type=int, choices=range(1, 13), help="Month, 1-12.", default=Default_Month)
    parser.add_argument(
        "-t",
        "--task",
        type=str,
        choices=["Report", "Heat Map", "Export"],
        help="Select between 'Report', 'Heat Map' and 'Export'.",
        default="Report",
    )
    args = parser.parse_args()

    configure_logging()
    try:
        run(SelectionState.create(args.pollutant, args.year, args.month), args.task)
    except AirQualityError as e:
        logger.error("%s", e)
        sys.exit(1)
