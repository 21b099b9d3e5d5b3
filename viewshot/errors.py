"""
Viewshot exceptions.

Playwright errors (``playwright.async_api.Error`` and its ``TimeoutError``)
are not wrapped and reach callers unchanged.
"""


class ViewshotError(Exception):
    """Base class for viewshot errors"""
    pass


class InvalidParameterError(ViewshotError, ValueError):
    """A capture parameter could not be used (e.g. device scale factor < 1)"""
    pass


class NavigationError(ViewshotError):
    """Navigation produced no usable response"""
    pass


class StatusCodeMismatchError(NavigationError, AssertionError):
    """Navigation returned a different HTTP status than expected"""

    def __init__(self, url: str, expected, received):
        self.url = url
        self.expected = expected
        self.received = received
        super().__init__(
            f'Wrong status code for "{url}": expected {expected}, received {received}'
        )


class ReloadTimeoutError(ViewshotError):
    """Page reload failed before a capture; the capture is skipped"""
    pass
