"""passcraft: password generation engine and strength scorer."""

from loguru import logger

from .errors import (
    ConstraintUnsatisfiable,
    EmptyAlphabetAfterExclusion,
    EmptyWordPool,
    EntropyUnavailable,
    GenerationError,
    InvalidRequest,
    NoAvailableDigits,
    NoCharacterClassSelected,
)
from .evaluator import evaluate_password, score_password
from .generator import generate
from .models import (
    Capitalization,
    CharClass,
    Complexity,
    MemorableRequest,
    NumberPosition,
    PasswordType,
    PinRequest,
    SmartRequest,
    UniformRequest,
    WordOrder,
)
from .random_source import FixedRandomSource, RandomSource, SystemRandomSource
from .wordlists import DEFAULT_WORD_POOL, WordPool

logger.disable("passcraft")

__all__ = [
    "Capitalization",
    "CharClass",
    "Complexity",
    "ConstraintUnsatisfiable",
    "DEFAULT_WORD_POOL",
    "EmptyAlphabetAfterExclusion",
    "EmptyWordPool",
    "EntropyUnavailable",
    "FixedRandomSource",
    "GenerationError",
    "InvalidRequest",
    "MemorableRequest",
    "NoAvailableDigits",
    "NoCharacterClassSelected",
    "NumberPosition",
    "PasswordType",
    "PinRequest",
    "RandomSource",
    "SmartRequest",
    "SystemRandomSource",
    "UniformRequest",
    "WordOrder",
    "WordPool",
    "evaluate_password",
    "generate",
    "score_password",
]
