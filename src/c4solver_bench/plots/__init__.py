from .chart import (
    plot_cost_by_depth,
    plot_histograms,
)

__all__ = [
    "plot_cost_by_depth",
    "plot_histograms",
]
