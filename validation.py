"""
Input validation for the FIFO simulator.

Checks a raw reference string and a raw frame count against the simulator's
limits and reports the first rule that fails.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from engine import MAX_FRAMES, MAX_REFERENCES, MIN_FRAMES

_INTEGER_LITERAL = re.compile(r"-?[0-9]+")


class ErrorKind(Enum):
    INVALID_FORMAT = "InvalidFormat"
    NEGATIVE_REFERENCE = "NegativeReference"
    LENGTH_OUT_OF_RANGE = "LengthOutOfRange"
    FRAME_COUNT_OUT_OF_RANGE = "FrameCountOutOfRange"


class ValidationError(ValueError):
    """Raised when simulator input breaks one of the validation rules."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def _tokens(raw_pages: Union[str, Iterable]) -> List[str]:
    if isinstance(raw_pages, str):
        if raw_pages.strip() == "":
            return []
        return [token.strip() for token in raw_pages.split(",")]
    return [str(token).strip() for token in raw_pages]


def _parse_frame_count(raw_frame_count) -> int:
    if isinstance(raw_frame_count, bool):
        raise ValidationError(ErrorKind.INVALID_FORMAT, "Error: Frame count must be a whole number.")
    if isinstance(raw_frame_count, int):
        return raw_frame_count
    if isinstance(raw_frame_count, float):
        if not raw_frame_count.is_integer():
            raise ValidationError(ErrorKind.INVALID_FORMAT, "Error: Frame count must be a whole number.")
        return int(raw_frame_count)
    text = str(raw_frame_count).strip()
    if not _INTEGER_LITERAL.fullmatch(text):
        raise ValidationError(ErrorKind.INVALID_FORMAT, "Error: Frame count must be a whole number.")
    return int(text)


def validate(raw_pages: Union[str, Iterable], raw_frame_count) -> Tuple[List[int], int]:
    """
    Validate simulator input.

    Rules are checked in a fixed order and the first failure wins:
    format of every reference, non-negative references, reference count,
    then frame count.

    Args:
        raw_pages (Union[str, Iterable]): Comma separated reference string, or
            the already split tokens
        raw_frame_count: Frame count as an int, float or text

    Returns:
        Tuple[List[int], int]: (pages, frame_count)

    Raises:
        ValidationError: With the kind and message of the first failed rule
    """
    tokens = _tokens(raw_pages)

    if any(not _INTEGER_LITERAL.fullmatch(token) for token in tokens):
        raise ValidationError(
            ErrorKind.INVALID_FORMAT,
            "Error: Reference String contains non-numeric or invalid input.",
        )
    pages = [int(token) for token in tokens]

    if any(page < 0 for page in pages):
        raise ValidationError(
            ErrorKind.NEGATIVE_REFERENCE,
            "Error: Page references must be non-negative (0 or greater).",
        )

    if len(pages) == 0 or len(pages) > MAX_REFERENCES:
        raise ValidationError(
            ErrorKind.LENGTH_OUT_OF_RANGE,
            f"Error: Please enter 1 to {MAX_REFERENCES} page references.",
        )

    frame_count = _parse_frame_count(raw_frame_count)
    if frame_count < MIN_FRAMES or frame_count > MAX_FRAMES:
        raise ValidationError(
            ErrorKind.FRAME_COUNT_OUT_OF_RANGE,
            f"Error: Frame count must be between {MIN_FRAMES} and {MAX_FRAMES}.",
        )

    return pages, frame_count


def check(raw_pages: Union[str, Iterable], raw_frame_count) -> Optional[ValidationError]:
    """Return the first validation error, or None if the input is valid."""
    try:
        validate(raw_pages, raw_frame_count)
    except ValidationError as e:
        return e
    return None
