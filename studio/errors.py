"""
Exceptions raised by the content studio stages.
"""


class StudioError(Exception):
    """Base class for every error the studio raises on purpose."""


class ValidationError(StudioError):
    """A topic, outline or question was blank after trimming."""


class GenerationFailure(StudioError):
    """The model provider rejected a request or a stream ended abnormally."""
