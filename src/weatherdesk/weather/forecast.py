"""Reduce 3-hourly forecast samples to one representative sample per day."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import tzinfo
from typing import Final

from weatherdesk.weather.models import ForecastDay, ForecastSample

logger: Final = logging.getLogger(__name__)

DAILY_COUNT: Final = 5
DAY_LABEL_FORMAT: Final = "%a"


def day_label(sample: ForecastSample, tz: tzinfo | None = None) -> str:
    """Short weekday name of a sample in the display timezone."""
    return sample.dt.astimezone(tz).strftime(DAY_LABEL_FORMAT)


def reduce_forecast(
    samples: Iterable[ForecastSample],
    tz: tzinfo | None = None,
    max_days: int = DAILY_COUNT,
) -> list[ForecastDay]:
    """Pick one sample per day, preferring the provider's noon slot.

    Samples are keyed by weekday label, so a horizon longer than a week
    would fold distinct dates together. OpenWeather returns five days.

    The first sample seen for a day is kept unless a later one is the
    midday sample. Days keep first-seen order. When more than
    ``max_days`` days come out, the first (the partial current day) is
    dropped and the next ``max_days`` are returned.

    Args:
        samples: Forecast samples in provider order
        tz: Timezone used to derive day labels (system local when None)
        max_days: Number of days to keep once truncation applies

    Returns:
        Ordered list of ForecastDay entries
    """
    by_day: dict[str, ForecastSample] = {}
    for sample in samples:
        label = day_label(sample, tz)
        if label not in by_day or sample.is_midday:
            by_day[label] = sample

    days = [
        ForecastDay(day=label, temp=sample.temp, condition_code=sample.condition_code)
        for label, sample in by_day.items()
    ]

    if len(days) > max_days:
        logger.debug("Dropping partial day %s from %d forecast days", days[0].day, len(days))
        return days[1 : max_days + 1]
    return days
