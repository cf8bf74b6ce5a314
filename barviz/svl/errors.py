# barviz/svl/errors.py
# All of these are input problems caught before anything is drawn.


class BarChartError(ValueError):
    pass


class ConfigurationError(BarChartError):
    """Target container id is missing or not present on the page."""


class EmptyDatasetError(BarChartError):
    """No data items were given; there is nothing to lay out."""


class InvalidValueError(BarChartError):
    """A data item is malformed or its value is non-numeric / non-finite."""
