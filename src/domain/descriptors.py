"""Mapping from source descriptor types to monitoring metric kinds."""

from __future__ import annotations

from typing import Dict, Tuple

from src.schemas.metrics_v1 import MetricDescriptorType
from src.schemas.monitoring_v3 import MetricKind, ValueType

_KIND_AND_TYPE: Dict[MetricDescriptorType, Tuple[MetricKind, ValueType]] = {
    MetricDescriptorType.GAUGE_INT64: (MetricKind.GAUGE, ValueType.INT64),
    MetricDescriptorType.GAUGE_DOUBLE: (MetricKind.GAUGE, ValueType.DOUBLE),
    MetricDescriptorType.GAUGE_DISTRIBUTION: (
        MetricKind.GAUGE,
        ValueType.DISTRIBUTION,
    ),
    MetricDescriptorType.CUMULATIVE_INT64: (MetricKind.CUMULATIVE, ValueType.INT64),
    MetricDescriptorType.CUMULATIVE_DOUBLE: (MetricKind.CUMULATIVE, ValueType.DOUBLE),
    MetricDescriptorType.CUMULATIVE_DISTRIBUTION: (
        MetricKind.CUMULATIVE,
        ValueType.DISTRIBUTION,
    ),
}

_UNSPECIFIED = (MetricKind.METRIC_KIND_UNSPECIFIED, ValueType.VALUE_TYPE_UNSPECIFIED)


def metric_kind_and_value_type(
    descriptor_type: MetricDescriptorType,
) -> Tuple[MetricKind, ValueType]:
    """Return the monitoring (metric kind, value type) for a descriptor type.

    Summaries and unspecified types have no monitoring counterpart and map to
    the unspecified pair.
    """
    return _KIND_AND_TYPE.get(descriptor_type, _UNSPECIFIED)
