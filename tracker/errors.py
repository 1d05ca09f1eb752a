"""Exception hierarchy shared by the scrapers, services and views."""


class TrackerError(Exception):
    """Base class for every error raised by the tracker."""


class NetworkError(TrackerError):
    """An HTTP round-trip failed (connection error or non-2xx status)."""


class ParseError(TrackerError):
    """A response could not be turned into the expected structure."""


class FormatError(ParseError):
    """A value (e.g. a monitor date) does not follow the expected format."""


class NotFoundError(TrackerError):
    """An expected link, selector or cache entry is absent."""


class LLMError(TrackerError):
    """The language model call failed or returned nothing usable."""
