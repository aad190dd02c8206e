from typing import Optional


class DetectionFailedError(Exception):
    """A hardware category could not be detected. Never raised by the scoring core."""

    def __init__(self, component: str, message: str, details: Optional[str] = None):
        self.component = component
        self.message = message
        self.details = details
        text = f"{component}: {message}"
        if details:
            text += f" ({details})"
        super().__init__(text)
