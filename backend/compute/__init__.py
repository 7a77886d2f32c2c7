# Compute package
from .config import Settings, get_settings
from .delayed_square import DelayedSquare, square_async
from .outcome import (
    INVALID_INPUT,
    NEGATIVE_NUMBER_MESSAGE,
    ComputationFailure,
    ComputationResult,
    InvalidInputError,
    Outcome,
)

__all__ = [
    'Settings',
    'get_settings',
    'DelayedSquare',
    'square_async',
    'INVALID_INPUT',
    'NEGATIVE_NUMBER_MESSAGE',
    'ComputationFailure',
    'ComputationResult',
    'InvalidInputError',
    'Outcome',
]
