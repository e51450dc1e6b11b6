"""Multi-scenario investment growth projection.

The engine is two pure functions: ``normalize`` turns any raw input into a
valid Configuration, and ``compute_report`` turns a Configuration into a Report.
"""

from growth_projection.core.normalize import normalize
from growth_projection.core.report import compute_report

__all__ = ["normalize", "compute_report"]
