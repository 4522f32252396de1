"""Shared structural types."""

from weatherdesk.types.weather import ConditionObj

__all__ = ["ConditionObj"]
