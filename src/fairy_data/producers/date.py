"""Date producer - random calendar date-times within a year window."""

from datetime import datetime, timedelta

from fairy_data.config import DateConfig
from fairy_data.producers.base import BaseProducer


class DateProducer:
    """Produces naive date-times uniformly distributed over whole years."""

    def __init__(self, base_producer: BaseProducer, config: DateConfig | None = None):
        self._base = base_producer
        self._config = config or DateConfig()

    @property
    def config(self) -> DateConfig:
        return self._config

    def random_date_between_years(self, year_low: int, year_high: int) -> datetime:
        """Draw a date-time in [Jan 1 year_low, Jan 1 year_high).

        Args:
            year_low: First year of the window (inclusive)
            year_high: End year of the window (exclusive)

        Returns:
            A naive datetime with second precision
        """
        if year_low >= year_high:
            raise ValueError(
                f"year_low ({year_low}) must be lower than year_high ({year_high})"
            )
        start = datetime(year_low, 1, 1)
        span = datetime(year_high, 1, 1) - start
        offset = self._base.random_between(0, int(span.total_seconds()) - 1)
        return start + timedelta(seconds=offset)

    def random_date_in_window(self) -> datetime:
        """Draw a date-time from the configured year window."""
        return self.random_date_between_years(self._config.year_low, self._config.year_high)
