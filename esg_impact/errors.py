# esg_impact/errors.py


class DashboardError(Exception):
    """Base class for everything the dashboard core raises."""


class DatasetError(DashboardError):
    """The metrics dataset is missing, malformed or internally inconsistent."""


class InsufficientDataError(DashboardError):
    """Not enough companies to compute the requested figure."""
