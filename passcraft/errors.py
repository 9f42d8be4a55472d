"""
passcraft.errors
Typed failures raised by the generation engine.
"""


class GenerationError(Exception):
    """Base class for every failure the engine raises."""

    kind = "GenerationError"


class InvalidRequest(GenerationError, ValueError):
    kind = "InvalidRequest"


class NoCharacterClassSelected(GenerationError, ValueError):
    kind = "NoCharacterClassSelected"

    def __init__(self, message: str = "At least one character class must be selected"):
        super().__init__(message)


class EmptyAlphabetAfterExclusion(GenerationError, ValueError):
    kind = "EmptyAlphabetAfterExclusion"

    def __init__(self, message: str = "Exclusion rules removed every usable character"):
        super().__init__(message)


class NoAvailableDigits(GenerationError, ValueError):
    kind = "NoAvailableDigits"

    def __init__(self, message: str = "Every digit 0-9 is excluded"):
        super().__init__(message)


class ConstraintUnsatisfiable(GenerationError, ValueError):
    """Strict PIN generation ran out of attempts without a compliant candidate."""

    kind = "ConstraintUnsatisfiable"


class EmptyWordPool(GenerationError, ValueError):
    kind = "EmptyWordPool"


class EntropyUnavailable(GenerationError, OSError):
    """The platform CSPRNG could not be read. Never replaced by a weaker source."""

    kind = "EntropyUnavailable"
