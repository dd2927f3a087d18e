"""
Cloud Monitoring monitoring/v3 Schemas

Pydantic rendition of the monitoring service's point wire format: a time
interval plus a typed value, with distributions described by bucket counts and
bucket options.
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from src.schemas.common import FrozenModel, Timestamp


class MetricKind(str, Enum):
    """How the points of a metric relate to time"""

    METRIC_KIND_UNSPECIFIED = "METRIC_KIND_UNSPECIFIED"
    GAUGE = "GAUGE"
    DELTA = "DELTA"
    CUMULATIVE = "CUMULATIVE"


class ValueType(str, Enum):
    """Type of the values a metric reports"""

    VALUE_TYPE_UNSPECIFIED = "VALUE_TYPE_UNSPECIFIED"
    BOOL = "BOOL"
    INT64 = "INT64"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    DISTRIBUTION = "DISTRIBUTION"
    MONEY = "MONEY"


class TimeInterval(FrozenModel):
    """Reporting window of a point. ``end_time`` is the observation time."""

    start_time: Timestamp
    end_time: Timestamp


class Explicit(FrozenModel):
    """Explicit bucket boundaries, in ascending order"""

    bounds: List[float] = Field(default_factory=list)


class BucketOptions(FrozenModel):
    """Bucket layout of a distribution"""

    explicit_buckets: Explicit


class Distribution(FrozenModel):
    """Distribution value in monitoring form.

    Attributes
    ----------
    count: int
        Number of values in the population.
    mean: float
        Mean of the population values.
    sum_of_squared_deviation: float
        Sum of squared deviations from the mean.
    bucket_counts: List[int]
        One count per bucket, in bucket order.
    bucket_options: Optional[BucketOptions]
        Bucket layout; absent when the source declared none.
    """

    count: int = 0
    mean: float = 0.0
    sum_of_squared_deviation: float = 0.0
    bucket_counts: List[int] = Field(default_factory=list)
    bucket_options: Optional[BucketOptions] = None


TypedValueKind = Literal["double", "int64", "distribution"]


class TypedValue(FrozenModel):
    """Single typed value. Exactly one field is set."""

    double_value: Optional[float] = None
    int64_value: Optional[int] = None
    distribution_value: Optional[Distribution] = None

    @model_validator(mode="after")
    def _validate_single_value(self) -> "TypedValue":
        set_fields = [
            name
            for name in ("double_value", "int64_value", "distribution_value")
            if getattr(self, name) is not None
        ]
        if len(set_fields) != 1:
            raise ValueError(
                f"exactly one value must be set, got {set_fields or 'none'}"
            )
        return self

    @property
    def kind(self) -> TypedValueKind:
        """Name of the variant that is set."""
        if self.double_value is not None:
            return "double"
        if self.int64_value is not None:
            return "int64"
        return "distribution"


class Point(FrozenModel):
    """Single data point of a monitoring time series"""

    interval: TimeInterval
    value: TypedValue
