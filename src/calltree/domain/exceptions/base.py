"""Base exceptions for calltree domain."""


class CallTreeError(Exception):
    """Root exception for all calltree errors.

    All domain exceptions inherit from this.
    Allows catching all calltree-specific errors.

    I/O errors raised by the output sink are NOT wrapped:
    they propagate to the caller unchanged.
    """
