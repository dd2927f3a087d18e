"""
OpenCensus metrics/v1 Schemas

Pydantic rendition of the vendor-neutral metrics data model as produced by
metrics collection pipelines. Only the parts needed to carry point values are
modelled: points, their typed values, distributions with explicit bucket
bounds, and time series.

The point value is a tagged union keyed on ``kind`` so consumers can dispatch
on the variant with a ``match`` statement.
"""

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field

from src.schemas.common import FrozenModel, Timestamp


class MetricDescriptorType(str, Enum):
    """Metric descriptor type (value shape plus aggregation kind)"""

    UNSPECIFIED = "UNSPECIFIED"
    GAUGE_INT64 = "GAUGE_INT64"
    GAUGE_DOUBLE = "GAUGE_DOUBLE"
    GAUGE_DISTRIBUTION = "GAUGE_DISTRIBUTION"
    CUMULATIVE_INT64 = "CUMULATIVE_INT64"
    CUMULATIVE_DOUBLE = "CUMULATIVE_DOUBLE"
    CUMULATIVE_DISTRIBUTION = "CUMULATIVE_DISTRIBUTION"
    SUMMARY = "SUMMARY"


# Distribution


class Exemplar(FrozenModel):
    """Example point recorded alongside a bucket"""

    value: float
    timestamp: Optional[Timestamp] = None
    attachments: Dict[str, str] = Field(default_factory=dict)


class Bucket(FrozenModel):
    """Single histogram bucket. An empty bucket carries a count of zero."""

    count: int = 0
    exemplar: Optional[Exemplar] = None


class Explicit(FrozenModel):
    """Explicit bucket boundaries.

    ``bounds`` of length N describe N + 1 buckets: (-inf, b0), [b0, b1), ...,
    [bN-1, +inf).
    """

    bounds: List[float] = Field(default_factory=list)


class BucketOptions(FrozenModel):
    """Bucket layout of a distribution. Explicit bounds are the only type."""

    type: Optional[Explicit] = None


class DoubleValue(FrozenModel):
    """Floating point point value"""

    kind: Literal["double"] = "double"
    double_value: float


class Int64Value(FrozenModel):
    """Integer point value"""

    kind: Literal["int64"] = "int64"
    int64_value: int


class DistributionValue(FrozenModel):
    """Histogram aggregate of recorded values.

    Attributes
    ----------
    count: int
        Number of recorded values.
    sum: float
        Sum of the recorded values.
    sum_of_squared_deviation: float
        Sum of squared deviations from the mean of the recorded values.
    buckets: List[Bucket]
        Per-bucket counts, in bucket order.
    bucket_options: Optional[BucketOptions]
        Layout of ``buckets``.
    """

    kind: Literal["distribution"] = "distribution"
    count: int = 0
    sum: float = 0.0
    sum_of_squared_deviation: float = 0.0
    buckets: List[Bucket] = Field(default_factory=list)
    bucket_options: Optional[BucketOptions] = None


# Summary


class ValueAtPercentile(FrozenModel):
    """Value of a distribution at a given percentile"""

    percentile: float = Field(..., gt=0.0, le=100.0)
    value: float


class Snapshot(FrozenModel):
    """Summary values computed over a recent sliding window"""

    count: Optional[int] = None
    sum: Optional[float] = None
    percentile_values: List[ValueAtPercentile] = Field(default_factory=list)


class SummaryValue(FrozenModel):
    """Pre-aggregated summary (count, sum and percentile snapshot)"""

    kind: Literal["summary"] = "summary"
    count: Optional[int] = None
    sum: Optional[float] = None
    snapshot: Optional[Snapshot] = None


PointValue = Annotated[
    Union[DoubleValue, Int64Value, DistributionValue, SummaryValue],
    Field(discriminator="kind"),
]


# Points and time series


class Point(FrozenModel):
    """Single timestamped metric observation"""

    timestamp: Timestamp
    value: Optional[PointValue] = None


class TimeSeries(FrozenModel):
    """Points sharing one set of label values.

    ``start_timestamp`` is set for cumulative metrics and left empty for gauges.
    """

    start_timestamp: Optional[Timestamp] = None
    label_values: List[str] = Field(default_factory=list)
    points: List[Point] = Field(default_factory=list)
