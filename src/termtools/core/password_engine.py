from __future__ import annotations

import math
import random
import string

from dataclasses import dataclass
from typing import Final, Optional

MAX_LENGTH: Final[int] = 128
MAX_COUNT: Final[int] = 100
DEFAULT_MAX_ATTEMPTS: Final[int] = 50

DEFAULT_SYMBOLS: Final[str] = '!@#$%^&*()_+-=[]{}|;:,.<>?'
SIMILAR_CHARACTERS: Final[frozenset[str]] = frozenset('Il1O0')


class GenerationError(ValueError):
    """Base class for every password generation failure."""


class NoClassSelected(GenerationError):
    """No character class is enabled."""


class EmptyAlphabet(GenerationError):
    """Enabled classes were fully cancelled out by the exclusions."""


class Infeasible(GenerationError):
    """The active constraints cannot be met within the retry budget."""


class InvalidLength(GenerationError):
    """Length is outside [1, MAX_LENGTH]."""


class InvalidCount(GenerationError):
    """Count is outside [1, MAX_COUNT]."""


@dataclass(frozen=True)
class GenerationConfig:
    """
    Constraints for one generation request.

    A config is built fresh from the host's state for every request and
    never mutated afterwards.
    """

    length: int = 12
    count: int = 1
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_numbers: bool = True
    use_symbols: bool = True
    avoid_similar: bool = False
    allow_duplicates: bool = True
    avoid_sequential: bool = False
    symbols: str = DEFAULT_SYMBOLS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


@dataclass(frozen=True)
class GenerationResult:
    """Passwords produced by one call, in production order."""

    passwords: tuple[str, ...]
    alphabet: str

    def __len__(self) -> int:
        return len(self.passwords)

    def __iter__(self):
        return iter(self.passwords)

    @property
    def entropy_bits(self) -> float:
        """
        Upper-bound entropy estimate of a single password.

        Exclusion rules shrink the real figure slightly; this ignores them.
        """
        if not self.passwords or len(self.alphabet) < 2:
            return 0.0
        return len(self.passwords[0]) * math.log2(len(self.alphabet))

    def as_text(self) -> str:
        """Return the passwords one per line."""
        return '\n'.join(self.passwords)


def build_alphabet(config: GenerationConfig) -> str:
    """
    Derive the ordered, de-duplicated set of eligible characters.

    Raises:
        NoClassSelected: If every class flag is off.
        EmptyAlphabet: If the similar-glyph exclusion removes everything.
    """
    pools = []

    if config.use_uppercase:
        pools.append(string.ascii_uppercase)
    if config.use_lowercase:
        pools.append(string.ascii_lowercase)
    if config.use_numbers:
        pools.append(string.digits)
    if config.use_symbols:
        pools.append(config.symbols.strip() or DEFAULT_SYMBOLS)

    if not pools:
        msg = 'At least one character set must be enabled.'
        raise NoClassSelected(msg)

    # dict keeps first-seen order
    alphabet = ''.join(dict.fromkeys(''.join(pools)))

    if config.avoid_similar:
        alphabet = ''.join(c for c in alphabet if c not in SIMILAR_CHARACTERS)

    if not alphabet:
        msg = 'No characters left after removing similar characters.'
        raise EmptyAlphabet(msg)

    return alphabet


def _check_bounds(config: GenerationConfig) -> None:
    if not 1 <= config.length <= MAX_LENGTH:
        msg = f'Length must be between 1 and {MAX_LENGTH}, got {config.length}.'
        raise InvalidLength(msg)
    if not 1 <= config.count <= MAX_COUNT:
        msg = f'Count must be between 1 and {MAX_COUNT}, got {config.count}.'
        raise InvalidCount(msg)
    if config.max_attempts < 1:
        msg = f'max_attempts must be positive, got {config.max_attempts}.'
        raise GenerationError(msg)


def _check_feasible(alphabet: str, config: GenerationConfig) -> None:
    if not config.allow_duplicates and config.length > len(alphabet):
        msg = (
            f'Cannot build {config.length} unique characters from an '
            f'alphabet of {len(alphabet)}.'
        )
        raise Infeasible(msg)
    if config.avoid_sequential and len(alphabet) == 1 and config.length > 1:
        msg = 'A single-character alphabet always repeats adjacent characters.'
        raise Infeasible(msg)


def validate(config: GenerationConfig) -> None:
    """
    Check a config without generating anything.

    Raises the same error class ``generate`` would raise for a config that
    is rejected up front.

    Raises:
        GenerationError: The first rule the config breaks.
    """
    _check_bounds(config)
    _check_feasible(build_alphabet(config), config)


def _is_run(a: str, b: str, c: str) -> bool:
    step = ord(b) - ord(a)
    return step in (1, -1) and ord(c) - ord(b) == step


def find_violations(password: str, config: GenerationConfig) -> list[int]:
    """
    Return the sorted positions that break the duplicate or sequential rule.

    For a pair or window the last position is reported, so redrawing the
    reported positions is enough to clear every violation.
    """
    bad: set[int] = set()

    if not config.allow_duplicates:
        seen: set[str] = set()
        for i, c in enumerate(password):
            if c in seen:
                bad.add(i)
            seen.add(c)

    if config.avoid_sequential:
        for i in range(1, len(password)):
            if password[i] == password[i - 1]:
                bad.add(i)
        for i in range(2, len(password)):
            if _is_run(password[i - 2], password[i - 1], password[i]):
                bad.add(i)

    return sorted(bad)


def _fits_left(chars: list[str], pos: int, candidate: str, unique: bool) -> bool:
    """True if ``candidate`` at ``pos`` breaks no rule with the characters before it."""
    if unique and candidate in chars[:pos]:
        return False
    if pos > 0 and chars[pos - 1] == candidate:
        return False
    if pos > 1 and _is_run(chars[pos - 2], chars[pos - 1], candidate):
        return False
    return True


def _attempt(
    alphabet: str,
    config: GenerationConfig,
    rng: random.Random,
) -> Optional[str]:
    """Draw and repair one candidate, or return None on a dead end."""
    if config.allow_duplicates:
        chars = [rng.choice(alphabet) for _ in range(config.length)]
    else:
        chars = rng.sample(alphabet, config.length)

    if not config.avoid_sequential:
        return ''.join(chars)

    unique = not config.allow_duplicates

    # Sweep left to right; a redraw can only break positions after it,
    # which the sweep has not reached yet.
    for pos in range(config.length):
        if _fits_left(chars, pos, chars[pos], unique):
            continue

        options = [c for c in alphabet if _fits_left(chars, pos, c, unique)]
        if not options:
            return None
        chars[pos] = rng.choice(options)

    return ''.join(chars)


def generate_one(
    alphabet: str,
    config: GenerationConfig,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a single password over ``alphabet``.

    Each attempt draws every position uniformly (without replacement when
    duplicates are forbidden), then sweeps left to right redrawing any
    position that completes a sequential run or repeats an earlier
    character. An attempt is abandoned only when some position has no
    valid character left; attempts stop after ``config.max_attempts``.

    Args:
        alphabet: Output of build_alphabet for the same config.
        config: Active constraints.
        rng: Random source; defaults to random.SystemRandom.

    Returns:
        A password of exactly ``config.length`` characters.

    Raises:
        Infeasible: If no attempt satisfied every constraint.
    """
    _check_feasible(alphabet, config)
    rng = rng or random.SystemRandom()

    for _ in range(config.max_attempts):
        candidate = _attempt(alphabet, config, rng)
        if candidate is not None and not find_violations(candidate, config):
            return candidate

    msg = (
        f'No password of length {config.length} met every constraint '
        f'after {config.max_attempts} attempts.'
    )
    raise Infeasible(msg)


def generate_many(
    config: GenerationConfig,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """
    Generate ``config.count`` independent passwords.

    Passwords may repeat across the batch; the constraints apply within
    each password only. A failure on any password discards the batch.

    Raises:
        GenerationError: If the config is invalid or any password fails.
    """
    _check_bounds(config)
    alphabet = build_alphabet(config)
    _check_feasible(alphabet, config)

    rng = rng or random.SystemRandom()
    passwords = tuple(
        generate_one(alphabet, config, rng) for _ in range(config.count)
    )
    return GenerationResult(passwords=passwords, alphabet=alphabet)


generate = generate_many
