"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers to
describe why a workout retrieval failed. Each carries a stable ``code`` that
use-case results and HTTP handlers expose to callers.

A workout that belongs to another user and a workout that does not exist
both raise WorkoutNotFound; callers must not be able to tell them apart.
"""


class WorkoutRetrievalError(Exception):
    """Base class for workout retrieval failures."""

    code = "retrieval_error"


class Unauthenticated(WorkoutRetrievalError):
    """No caller identity was supplied.

    The identity is verified upstream by the auth provider, so reaching the
    retrieval core without one is a wiring bug in the caller.
    """

    code = "unauthenticated"


class WorkoutNotFound(WorkoutRetrievalError):
    """No workout matched both the id and the caller's user id."""

    code = "not_found"


class StoreUnavailable(WorkoutRetrievalError):
    """The backing store failed or timed out.

    Transient; callers may retry with backoff. The core never retries.
    """

    code = "store_unavailable"


class InvalidDate(WorkoutRetrievalError, ValueError):
    """A calendar date could not be parsed as YYYY-MM-DD."""

    code = "invalid_date"
