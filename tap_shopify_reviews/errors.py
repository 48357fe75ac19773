"""Exception types raised by the scraper and the CSV/JSON writers."""


class ScraperError(Exception):
    """Base class for errors this package raises on purpose."""


class ValidationError(ScraperError, ValueError):
    """Input cannot be serialized, or an unsupported output format was asked for."""


class ExtractionError(ScraperError):
    """The rendered page could not be read; the whole run is aborted."""
