"""Base model and enum for station records.

Every record model inherits from :class:`ConsoleBaseModel` which is
frozen and ignores unknown keys, so columns added to the backend table
later do not break parsing.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class ConsoleEnum(enum.StrEnum):
    """Base for string enums whose values are stored verbatim in the backend."""


class ConsoleBaseModel(BaseModel):
    """Base for models parsed from or sent to the backend."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=False,
    )
