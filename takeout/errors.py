"""Exception hierarchy for the takeout app."""


class TakeoutError(Exception):
    """Base class for takeout errors."""


# --- Content sources ---


class ContentSourceError(TakeoutError):
    """A single content source could not produce affirmations."""


class NetworkFailure(ContentSourceError):
    """Request rejected by the transport or answered with a non-2xx status."""


class MalformedResponse(ContentSourceError):
    """Body is missing the expected tabular (or list) structure."""


class BackendReportedError(ContentSourceError):
    """The backend answered successfully but embedded an ``error`` field."""


class EmptyResult(ContentSourceError):
    """Zero usable affirmations after extraction."""


class ExhaustedSources(TakeoutError):
    """Both the remote and the local source yielded nothing."""


# --- Session ---


class InvalidTransition(TakeoutError, ValueError):
    """A page transition was requested from a page that does not allow it."""
