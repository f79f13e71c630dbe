"""Effect-related exceptions."""

from .base import ChromatrixError


class EffectError(ChromatrixError):
    """Effect construction or encoding failed."""
    pass


class InvalidFpsError(EffectError, ValueError):
    """Frame rate outside the range the front end accepts."""

    def __init__(self, fps: object):
        """
        Initialize invalid-fps error.

        Args:
            fps: The rejected frame rate
        """
        super().__init__(
            user_message=f"Invalid FPS value {fps}, must be in range 1..=80",
            recoverable=True,
            recovery_hint="Pick a whole number of frames per second between 1 and 80.",
        )
        self.fps = fps


class EffectSerializationError(EffectError):
    """Effect document could not be built or serialized."""

    def __init__(self, effect_name: str, reason: str):
        """
        Initialize serialization error.

        Args:
            effect_name: Name of the effect being encoded
            reason: Underlying serializer message
        """
        super().__init__(
            user_message=f"Failed to encode effect '{effect_name}'",
            technical_message=f"Serialization of effect {effect_name!r} failed: {reason}",
            recoverable=False,
        )
        self.effect_name = effect_name
        self.reason = reason
