from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator


def to_naive_utc(value: datetime) -> datetime:
    """Columns store naive UTC; convert offset-aware input before it is compared or saved."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


UtcDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]
