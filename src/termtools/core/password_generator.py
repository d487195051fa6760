from __future__ import annotations

import random

from dataclasses import dataclass, field
from typing import Optional

from .password_engine import (
    DEFAULT_SYMBOLS,
    MAX_COUNT,
    MAX_LENGTH,
    GenerationConfig,
    GenerationError,
    generate,
)


@dataclass
class PasswordGenerator:
    """
    Hold the password tool's settings and its latest output.

    Every generation builds a fresh GenerationConfig from the current
    settings; the engine itself keeps no state.
    """

    length: int = 12
    quantity: int = 1
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_numbers: bool = True
    use_symbols: bool = True
    avoid_similar: bool = False
    allow_duplicates: bool = True
    avoid_sequential: bool = False
    symbols: str = DEFAULT_SYMBOLS
    passwords: list[str] = field(default_factory=list)
    entropy_bits: float = 0.0
    error: Optional[str] = None
    rng: Optional[random.Random] = field(default=None, repr=False)

    def increase_length(self) -> None:
        self.length = min(self.length + 1, MAX_LENGTH)

    def decrease_length(self) -> None:
        self.length = max(self.length - 1, 1)

    def increase_quantity(self) -> None:
        self.quantity = min(self.quantity + 1, MAX_COUNT)

    def decrease_quantity(self) -> None:
        self.quantity = max(self.quantity - 1, 1)

    def toggle_uppercase(self) -> None:
        self.use_uppercase = not self.use_uppercase

    def toggle_lowercase(self) -> None:
        self.use_lowercase = not self.use_lowercase

    def toggle_numbers(self) -> None:
        self.use_numbers = not self.use_numbers

    def toggle_symbols(self) -> None:
        self.use_symbols = not self.use_symbols

    def toggle_similar_characters(self) -> None:
        self.avoid_similar = not self.avoid_similar

    def toggle_duplicate_characters(self) -> None:
        self.allow_duplicates = not self.allow_duplicates

    def toggle_sequential_characters(self) -> None:
        self.avoid_sequential = not self.avoid_sequential

    def to_config(self, count: Optional[int] = None) -> GenerationConfig:
        """Snapshot the current settings into an immutable config."""
        return GenerationConfig(
            length=self.length,
            count=self.quantity if count is None else count,
            use_uppercase=self.use_uppercase,
            use_lowercase=self.use_lowercase,
            use_numbers=self.use_numbers,
            use_symbols=self.use_symbols,
            avoid_similar=self.avoid_similar,
            allow_duplicates=self.allow_duplicates,
            avoid_sequential=self.avoid_sequential,
            symbols=self.symbols,
        )

    def _run(self, config: GenerationConfig) -> list[str]:
        try:
            result = generate(config, self.rng)
        except GenerationError as exc:
            self.passwords = []
            self.entropy_bits = 0.0
            self.error = str(exc)
            raise

        self.passwords = list(result.passwords)
        self.entropy_bits = result.entropy_bits
        self.error = None
        return self.passwords

    def generate_password(self) -> str:
        """
        Return a single password built from the current settings.

        Raises:
            GenerationError: If the settings cannot produce a password.
        """
        return self._run(self.to_config(count=1))[0]

    def generate_multiple_passwords(self) -> list[str]:
        """
        Return ``quantity`` passwords built from the current settings.

        Raises:
            GenerationError: If any password cannot be produced.
        """
        return self._run(self.to_config())

    def clear_password(self) -> None:
        self.passwords = []
        self.entropy_bits = 0.0
        self.error = None
