"""Weather-related type definitions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConditionObj(Protocol):
    """Duck-type for records that carry an OpenWeather condition code."""

    condition_code: int
