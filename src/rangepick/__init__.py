"""rangepick — date range selection and calendar engine."""

__version__ = "0.1.0"
