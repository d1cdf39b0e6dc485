"""
Shared validation helpers for Pydantic schemas.

Dates arrive from the clients as ISO strings; Pydantic's ``date`` type parses
them. Clock times are plain ``HH:MM`` strings.
"""
from typing import Annotated

from pydantic import Field, StringConstraints

TIME_PATTERN = r"^\d{2}:\d{2}$"

ClockTime = Annotated[str, StringConstraints(pattern=TIME_PATTERN)]
Name255 = Annotated[str, StringConstraints(min_length=1, max_length=255)]
Text255 = Annotated[str, StringConstraints(max_length=255)]
Text100 = Annotated[str, StringConstraints(max_length=100)]
PositiveMeasure = Annotated[float, Field(gt=0)]

