"""
passcraft.models
Request model: one frozen dataclass per password type.

Each request carries only its own parameters and validates itself on
construction, so an invalid cross-type combination cannot be expressed.
"""

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Mapping as _MappingABC
from typing import FrozenSet, Mapping, Optional, Union

from .errors import InvalidRequest


class PasswordType(str, Enum):
    UNIFORM = "uniform"
    PIN = "pin"
    MEMORABLE = "memorable"
    SMART = "smart"


class CharClass(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"


class Capitalization(str, Enum):
    NONE = "none"
    FIRST = "first"
    ALL = "all"
    RANDOM = "random"


class NumberPosition(str, Enum):
    END = "end"
    BETWEEN = "between"
    RANDOM = "random"


class Complexity(str, Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class WordOrder(str, Enum):
    ADJECTIVE_NOUN = "adjective-noun"
    VERB_NOUN = "verb-noun"
    RANDOM = "random"


def _coerce(enum_cls, value, name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidRequest(f"{name} must be one of: {allowed} (got {value!r})") from None


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequest(f"{name} must be an integer")
    if not low <= value <= high:
        raise InvalidRequest(f"{name} must be between {low} and {high} (got {value})")


def _default_minimums() -> Mapping[CharClass, int]:
    return {c: 1 for c in CharClass}


@dataclass(frozen=True)
class UniformRequest:
    length: int = 16
    lower: bool = True
    upper: bool = True
    digits: bool = True
    symbols: bool = True
    custom_symbols: Optional[str] = None
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    min_per_class: Mapping[CharClass, int] = field(default_factory=_default_minimums)

    password_type = PasswordType.UNIFORM

    def __post_init__(self):
        _check_range("length", self.length, 1, 128)
        if self.custom_symbols is not None and not isinstance(self.custom_symbols, str):
            raise InvalidRequest("custom_symbols must be a string")
        if not isinstance(self.min_per_class, _MappingABC):
            raise InvalidRequest("min_per_class must map class names to counts")
        minimums = {}
        for key, count in dict(self.min_per_class).items():
            cls = _coerce(CharClass, key, "min_per_class key")
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidRequest(f"min_per_class[{cls.value}] must be an integer >= 0")
            minimums[cls] = count
        object.__setattr__(self, "min_per_class", minimums)


@dataclass(frozen=True)
class PinRequest:
    length: int = 6
    exclude_digits: FrozenSet[str] = frozenset()
    no_repeats: bool = False
    no_sequence: bool = False
    # strict: fail instead of falling back (all digits excluded, retries exhausted)
    strict: bool = False

    password_type = PasswordType.PIN

    def __post_init__(self):
        _check_range("length", self.length, 4, 12)
        if isinstance(self.exclude_digits, (int, float)):
            raise InvalidRequest("exclude_digits must be a collection of digits")
        excluded = frozenset(str(d) for d in self.exclude_digits)
        bad = sorted(d for d in excluded if len(d) != 1 or d not in "0123456789")
        if bad:
            raise InvalidRequest(f"exclude_digits may only contain single digits (got {bad})")
        object.__setattr__(self, "exclude_digits", excluded)


@dataclass(frozen=True)
class MemorableRequest:
    word_count: int = 3
    separator: str = "-"
    capitalization: Capitalization = Capitalization.FIRST
    include_numbers: bool = True
    number_position: NumberPosition = NumberPosition.END

    password_type = PasswordType.MEMORABLE

    def __post_init__(self):
        _check_range("word_count", self.word_count, 2, 6)
        if not isinstance(self.separator, str):
            raise InvalidRequest("separator must be a string")
        object.__setattr__(self, "capitalization",
                           _coerce(Capitalization, self.capitalization, "capitalization"))
        object.__setattr__(self, "number_position",
                           _coerce(NumberPosition, self.number_position, "number_position"))


@dataclass(frozen=True)
class SmartRequest:
    complexity: Complexity = Complexity.MEDIUM
    word_order: WordOrder = WordOrder.RANDOM
    include_symbols: bool = True

    password_type = PasswordType.SMART

    def __post_init__(self):
        object.__setattr__(self, "complexity",
                           _coerce(Complexity, self.complexity, "complexity"))
        object.__setattr__(self, "word_order",
                           _coerce(WordOrder, self.word_order, "word_order"))


PasswordRequest = Union[UniformRequest, PinRequest, MemorableRequest, SmartRequest]

REQUEST_TYPES = {
    PasswordType.UNIFORM: UniformRequest,
    PasswordType.PIN: PinRequest,
    PasswordType.MEMORABLE: MemorableRequest,
    PasswordType.SMART: SmartRequest,
}


def password_type_of(value) -> PasswordType:
    return _coerce(PasswordType, value, "type")
