from datetime import UTC, datetime, timedelta

import pytest

from conftest import FORECAST_START, make_forecast_payload, make_sample
from weatherdesk.weather.forecast import day_label, reduce_forecast
from weatherdesk.weather.models import ForecastResponse, ForecastSample


def three_hourly(count: int, start: datetime = FORECAST_START) -> list[ForecastSample]:
    return [make_sample(start + timedelta(hours=3 * i), float(i)) for i in range(count)]


def test_empty_input_yields_empty_output() -> None:
    assert reduce_forecast([], tz=UTC) == []


def test_single_day_yields_single_entry() -> None:
    samples = three_hourly(3)  # Sat 15:00, 18:00, 21:00
    days = reduce_forecast(samples, tz=UTC)
    assert [d.day for d in days] == ["Sat"]
    assert days[0].temp == 0.0  # no midday slot → first sample kept


def test_full_provider_window_drops_partial_first_day() -> None:
    samples = three_hourly(40)  # Sat afternoon .. Thu noon → 6 weekday labels
    days = reduce_forecast(samples, tz=UTC)

    assert [d.day for d in days] == ["Sun", "Mon", "Tue", "Wed", "Thu"]
    # every full day is represented by its 12:00 slot
    for day in days:
        sample = next(s for s in samples if day_label(s, UTC) == day.day and s.is_midday)
        assert day.temp == sample.temp


def test_more_than_five_days_equals_grouping_without_first() -> None:
    samples = three_hourly(40)
    grouped = reduce_forecast(samples, tz=UTC, max_days=100)
    assert len(grouped) == 6
    assert reduce_forecast(samples, tz=UTC) == grouped[1:]


@pytest.mark.parametrize("day_count", [1, 2, 3, 4, 5])
def test_five_or_fewer_days_are_not_truncated(day_count: int) -> None:
    start = datetime(2025, 5, 5, 0, 0, tzinfo=UTC)  # Monday midnight
    samples = three_hourly(8 * day_count, start=start)
    days = reduce_forecast(samples, tz=UTC)

    labels = ["Mon", "Tue", "Wed", "Thu", "Fri"][:day_count]
    assert [d.day for d in days] == labels


def test_midday_sample_overwrites_earlier_sample() -> None:
    morning = make_sample(datetime(2025, 5, 6, 9, 0, tzinfo=UTC), 11.0, 500)
    noon = make_sample(datetime(2025, 5, 6, 12, 0, tzinfo=UTC), 17.5, 802)
    days = reduce_forecast([morning, noon], tz=UTC)

    assert len(days) == 1
    assert days[0].temp == 17.5
    assert days[0].condition_code == 802


def test_later_non_midday_sample_does_not_overwrite() -> None:
    noon = make_sample(datetime(2025, 5, 6, 12, 0, tzinfo=UTC), 17.5, 802)
    evening = make_sample(datetime(2025, 5, 6, 18, 0, tzinfo=UTC), 13.0, 600)
    days = reduce_forecast([noon, evening], tz=UTC)
    assert days[0].temp == 17.5


def test_first_seen_order_is_kept() -> None:
    wed = make_sample(datetime(2025, 5, 7, 9, 0, tzinfo=UTC), 1.0)
    mon = make_sample(datetime(2025, 5, 5, 9, 0, tzinfo=UTC), 2.0)
    tue = make_sample(datetime(2025, 5, 6, 9, 0, tzinfo=UTC), 3.0)
    days = reduce_forecast([wed, mon, tue], tz=UTC)
    assert [d.day for d in days] == ["Wed", "Mon", "Tue"]


def test_same_weekday_a_week_apart_shares_a_label() -> None:
    first = make_sample(datetime(2025, 5, 5, 9, 0, tzinfo=UTC), 10.0)
    next_week = make_sample(datetime(2025, 5, 12, 9, 0, tzinfo=UTC), 20.0)
    days = reduce_forecast([first, next_week], tz=UTC)
    assert len(days) == 1
    assert days[0].temp == 10.0


def test_day_label_follows_display_timezone() -> None:
    from zoneinfo import ZoneInfo

    # 02:00 UTC Tuesday is still Monday evening in New York
    sample = make_sample(datetime(2025, 5, 6, 2, 0, tzinfo=UTC), 5.0)
    assert day_label(sample, UTC) == "Tue"
    assert day_label(sample, ZoneInfo("America/New_York")) == "Mon"


def test_reduces_parsed_provider_payload() -> None:
    samples = ForecastResponse.model_validate(make_forecast_payload()).to_samples()
    days = reduce_forecast(samples, tz=UTC)
    assert len(days) == 5
    assert days[0].day == "Sun"
