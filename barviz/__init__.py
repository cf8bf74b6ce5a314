from barviz.chart.bar_chart import ChartHandle, create_bar_chart
from barviz.svl.errors import BarChartError, ConfigurationError, EmptyDatasetError, InvalidValueError

__all__ = [
    "create_bar_chart",
    "ChartHandle",
    "BarChartError",
    "ConfigurationError",
    "EmptyDatasetError",
    "InvalidValueError",
]
