"""Translation of OpenCensus metric points into Cloud Monitoring points.

All functions here are pure: they read only their arguments, never mutate
them, and either return a fully built monitoring object or raise
`ConversionError` without producing partial output.

Distribution note: the monitoring ``mean`` is carried over directly from the
source ``sum`` field rather than computed as ``sum / count``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from src.domain.errors import ConversionError
from src.schemas import metrics_v1, monitoring_v3
from src.schemas.common import Timestamp

logger = logging.getLogger(__name__)


def from_proto_point(
    start_timestamp: Timestamp, point: metrics_v1.Point
) -> monitoring_v3.Point:
    """Convert a single source point into a monitoring point.

    Parameters
    ----------
    start_timestamp: Timestamp
        Beginning of the reporting interval; becomes ``interval.start_time``.
    point: metrics_v1.Point
        Source point; its timestamp becomes ``interval.end_time``.

    Returns
    -------
    monitoring_v3.Point
        Point whose value variant mirrors the source variant.

    Raises
    ------
    ConversionError
        If the value is absent, of an unknown or unsupported variant, or a
        distribution uses a bucket layout other than explicit bounds.
    """
    value = to_typed_value(point.value)
    return monitoring_v3.Point(
        interval=monitoring_v3.TimeInterval(
            start_time=start_timestamp, end_time=point.timestamp
        ),
        value=value,
    )


def to_typed_value(value: Optional[metrics_v1.PointValue]) -> monitoring_v3.TypedValue:
    """Map a source point value onto the matching monitoring variant."""
    match value:
        case metrics_v1.DoubleValue(double_value=double_value):
            return monitoring_v3.TypedValue(double_value=double_value)
        case metrics_v1.Int64Value(int64_value=int64_value):
            return monitoring_v3.TypedValue(int64_value=int64_value)
        case metrics_v1.DistributionValue():
            return monitoring_v3.TypedValue(distribution_value=to_distribution(value))
        case metrics_v1.SummaryValue():
            logger.debug("convert.unsupported_value", extra={"kind": "summary"})
            raise ConversionError(
                "summary values have no monitoring equivalent", kind="summary"
            )
        case None:
            logger.debug("convert.unsupported_value", extra={"kind": None})
            raise ConversionError("point has no value set")
        case _:
            kind = getattr(value, "kind", type(value).__name__)
            logger.debug("convert.unknown_value", extra={"kind": kind})
            raise ConversionError(f"unknown point value type: {kind!r}", kind=kind)


def to_distribution(
    value: metrics_v1.DistributionValue,
) -> monitoring_v3.Distribution:
    """Re-express a source distribution with bucket counts and bucket options."""
    bucket_options = to_bucket_options(value.bucket_options)
    return monitoring_v3.Distribution(
        count=value.count,
        mean=value.sum if value.count > 0 else 0.0,
        sum_of_squared_deviation=value.sum_of_squared_deviation,
        bucket_counts=[bucket.count for bucket in value.buckets],
        bucket_options=bucket_options,
    )


def to_bucket_options(
    options: Optional[metrics_v1.BucketOptions],
) -> Optional[monitoring_v3.BucketOptions]:
    """Copy explicit bucket bounds; any other layout is rejected."""
    if options is None or options.type is None:
        return None
    if not isinstance(options.type, metrics_v1.Explicit):
        kind = type(options.type).__name__
        raise ConversionError(f"unsupported bucket options type: {kind}", kind=kind)
    return monitoring_v3.BucketOptions(
        explicit_buckets=monitoring_v3.Explicit(bounds=list(options.type.bounds))
    )


def from_proto_time_series(
    time_series: metrics_v1.TimeSeries,
    default_start: Optional[Timestamp] = None,
) -> List[monitoring_v3.Point]:
    """Convert every point of a time series, failing on the first bad point.

    The interval start is the series' own ``start_timestamp``, then
    ``default_start``. Gauge series carry neither, in which case each point
    reports the instant ``[timestamp, timestamp]``.
    """
    start = time_series.start_timestamp or default_start
    return [
        from_proto_point(start if start is not None else pt.timestamp, pt)
        for pt in time_series.points
    ]


@dataclass
class PointFailure:
    """Source point that could not be converted."""

    index: int
    error: ConversionError


@dataclass
class ConversionResult:
    """
    Converted points plus the points that were skipped.

    Attributes
    ----------
    points : List[monitoring_v3.Point]
        Successfully converted points, in source order
    failures : List[PointFailure]
        Skipped source points with the reason
    """

    points: List[monitoring_v3.Point] = field(default_factory=list)
    failures: List[PointFailure] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        total = len(self.points) + len(self.failures)
        if total == 0:
            return 0.0
        return len(self.points) / total

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0

    @property
    def all_succeeded(self) -> bool:
        return len(self.failures) == 0 and len(self.points) > 0

    @property
    def all_failed(self) -> bool:
        return len(self.points) == 0 and len(self.failures) > 0


def convert_points(
    start_timestamp: Timestamp, points: Iterable[metrics_v1.Point]
) -> ConversionResult:
    """Convert points, skipping (and logging) those that cannot be converted.

    Parameters
    ----------
    start_timestamp: Timestamp
        Interval start shared by all points.
    points: Iterable[metrics_v1.Point]
        Source points.

    Returns
    -------
    ConversionResult
        Converted points and per-point failures.
    """
    result = ConversionResult()
    for index, pt in enumerate(points):
        try:
            result.points.append(from_proto_point(start_timestamp, pt))
        except ConversionError as exc:
            logger.warning(
                "convert.point_skipped",
                extra={"index": index, "kind": exc.kind, "error": str(exc)},
            )
            result.failures.append(PointFailure(index=index, error=exc))
    return result
