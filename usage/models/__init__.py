"""Models for measurement data structures."""

from .invocation import Invocation
from .timing_sample import TimingSample
from .resource_usage_snapshot import ResourceUsageSnapshot
from .derived_metrics import DerivedMetrics
from .usage_report import UsageReport

__all__ = ["Invocation", "TimingSample", "ResourceUsageSnapshot", "DerivedMetrics", "UsageReport"]
