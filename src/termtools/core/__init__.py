from .password_engine import (
    EmptyAlphabet,
    GenerationConfig,
    GenerationError,
    GenerationResult,
    Infeasible,
    InvalidCount,
    InvalidLength,
    NoClassSelected,
    build_alphabet,
    generate,
    generate_many,
    generate_one,
    validate,
)
from .password_generator import PasswordGenerator

__all__ = [
    'EmptyAlphabet',
    'GenerationConfig',
    'GenerationError',
    'GenerationResult',
    'Infeasible',
    'InvalidCount',
    'InvalidLength',
    'NoClassSelected',
    'PasswordGenerator',
    'build_alphabet',
    'generate',
    'generate_many',
    'generate_one',
    'validate',
]
