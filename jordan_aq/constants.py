## Default Inputs: Nitrogen Dioxide over Jordan, January 2025
Default_Pollutant = "NO2"
Default_Year = 2025
Default_Month = 1
Year_Range = (2019, 2026)  # Sentinel-5P offline products start mid 2018

## Region of Interest
Boundary_Dataset = "USDOS/LSIB_SIMPLE/2017"
Boundary_Attribute = "country_na"
Boundary_Value = "Jordan"

## Aggregation and Export Constants
Sample_Scale = 7000  # resolution in meters per pixel for the city samples
Export_Scale = 7000
Export_Max_Pixels = 1e9
Export_Format = "GeoTIFF"
Export_Prefix = "Jordan_AQ"

## Map Constants
Map_Center = (31.2, 36.5)  # lat, lon
Map_Zoom = 7
Map_Basemap = "HYBRID"
Boundary_Color = "white"
Chart_Color = "#e74c3c"

default_palette = ["black", "blue", "purple", "cyan", "green", "yellow", "red"]
sulfur_palette = ["blue", "green", "yellow", "orange", "red"]

POLLUTANTS = {
    "NO2": {
        "label": "Nitrogen Dioxide (NO2)",
        "collection": "COPERNICUS/S5P/OFFL/L3_NO2",
        "band": "tropospheric_NO2_column_number_density",
        "min": 0,
        "max": 0.0002,
        "unit": "mol/m²",
        "palette": default_palette,
        "insight": "🚗 NO₂: Sources include traffic and fuel combustion.",
    },
    "SO2": {
        "label": "Sulfur Dioxide (SO2)",
        "collection": "COPERNICUS/S5P/OFFL/L3_SO2",
        "band": "SO2_column_number_density",
        "min": 0,
        "max": 0.0005,
        "unit": "mol/m²",
        "palette": sulfur_palette,
        "insight": "🏭 SO₂: Industrial emissions and power plants.",
    },
    "CO": {
        "label": "Carbon Monoxide (CO)",
        "collection": "COPERNICUS/S5P/OFFL/L3_CO",
        "band": "CO_column_number_density",
        "min": 0,
        "max": 0.05,
        "unit": "mol/m²",
        "palette": default_palette,
        "insight": "🔥 CO: Incomplete combustion in urban areas.",
    },
    "AerosolIndex": {
        "label": "Aerosol Index (Dust/Smoke)",
        "collection": "COPERNICUS/S5P/OFFL/L3_AER_AI",
        "band": "absorbing_aerosol_index",
        "min": -1,
        "max": 2,
        "unit": "Index",
        "palette": default_palette,
        "insight": "🏜️ Aerosol Index: Dust and smoke transport.",
    },
}

# Order matters: results and charts follow it.
CITIES = [
    ("Irbid", (35.85, 32.55)),
    ("Amman", (35.92, 31.95)),
    ("Zarqa", (36.10, 32.06)),
    ("Aqaba", (35.00, 29.53)),
    ("Mafraq", (36.24, 32.34)),
]
