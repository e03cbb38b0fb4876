"""
Exceptions raised by the activity log builder and service.
"""


class ActivityLogError(Exception):
    """Base exception for all activity log errors."""
    pass


class InvalidActivityArgument(ActivityLogError, ValueError):
    """
    Raised when a builder method receives a value it cannot store.

    Example:
        Passing an unsaved model instance or a plain dict to performed_on().
    """
    pass
