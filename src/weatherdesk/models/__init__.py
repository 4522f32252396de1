"""Data model base classes and validators for weatherdesk.

This module provides shared base classes like TimeStampModel used for
validating and transforming raw weather API data into structured models.
"""
