from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Naive UTC timestamp, the format stored in DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def today() -> date:
    return utcnow().date()


class CamelModel(BaseModel):
    """Pydantic model serialized with camelCase keys on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True
    )


def to_naive_utc(value: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are assumed UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
