"""Root of the chromatrix exception tree.

Every error raised by the registry, the device listing parser, effect
building and config loading derives from ``ChromatrixError``. Each one
carries two texts: ``user_message`` is printed by the CLI as ``ERROR: ...``,
``technical_message`` goes to the log file (e.g. which record of the
device listing failed, or which keyboard lacks a matrix).
"""

from typing import Optional


class ChromatrixError(Exception):
    """
    Base exception for chromatrix.

    Attributes:
        user_message: Short message shown on the command line
        technical_message: Detail for the log file (defaults to user_message)
        recoverable: True when the user can fix the input and retry
        recovery_hint: Suggested next step, e.g. a chromatrix command to run
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.technical_message!r})"

    def log_message(self) -> str:
        """Single line for the log file, tagged with the error class."""
        return f"[{type(self).__name__}] {self.technical_message}"

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
