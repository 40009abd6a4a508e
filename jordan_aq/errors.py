class AirQualityError(Exception):
    """Base class for errors raised by the air quality pipeline."""


class UnknownPollutantError(AirQualityError, KeyError):
    """Raised when a pollutant id has no configuration."""

    def __init__(self, pollutant):
        self.pollutant = pollutant
        super().__init__(f"Unknown pollutant: {pollutant!r}")

    def __str__(self):
        return self.args[0]


class EngineUnavailableError(AirQualityError):
    """Raised when the raster engine cannot be reached or a query fails."""


class InvalidSelectionError(AirQualityError, ValueError):
    """Raised for a selection that cannot name a calendar month."""
