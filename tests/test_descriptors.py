"""
Tests for descriptor type to metric kind mapping.
"""

import pytest

from src.domain.descriptors import metric_kind_and_value_type
from src.schemas.metrics_v1 import MetricDescriptorType
from src.schemas.monitoring_v3 import MetricKind, ValueType


@pytest.mark.parametrize(
    "descriptor_type,expected",
    [
        (MetricDescriptorType.GAUGE_INT64, (MetricKind.GAUGE, ValueType.INT64)),
        (MetricDescriptorType.GAUGE_DOUBLE, (MetricKind.GAUGE, ValueType.DOUBLE)),
        (
            MetricDescriptorType.GAUGE_DISTRIBUTION,
            (MetricKind.GAUGE, ValueType.DISTRIBUTION),
        ),
        (
            MetricDescriptorType.CUMULATIVE_INT64,
            (MetricKind.CUMULATIVE, ValueType.INT64),
        ),
        (
            MetricDescriptorType.CUMULATIVE_DOUBLE,
            (MetricKind.CUMULATIVE, ValueType.DOUBLE),
        ),
        (
            MetricDescriptorType.CUMULATIVE_DISTRIBUTION,
            (MetricKind.CUMULATIVE, ValueType.DISTRIBUTION),
        ),
    ],
)
def test_known_descriptor_types(descriptor_type, expected):
    assert metric_kind_and_value_type(descriptor_type) == expected


@pytest.mark.parametrize(
    "descriptor_type",
    [MetricDescriptorType.UNSPECIFIED, MetricDescriptorType.SUMMARY],
)
def test_unmapped_descriptor_types(descriptor_type):
    """Test types without a monitoring counterpart map to unspecified."""
    assert metric_kind_and_value_type(descriptor_type) == (
        MetricKind.METRIC_KIND_UNSPECIFIED,
        ValueType.VALUE_TYPE_UNSPECIFIED,
    )


def test_descriptor_type_accepts_wire_string():
    """Test the str-valued enum resolves from its wire name."""
    kind, value_type = metric_kind_and_value_type(MetricDescriptorType("GAUGE_DOUBLE"))

    assert kind.value == "GAUGE"
    assert value_type.value == "DOUBLE"
