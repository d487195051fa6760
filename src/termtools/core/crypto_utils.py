from __future__ import annotations

from typing import Final

from cryptography.hazmat.primitives import hashes

ALGORITHMS: Final[dict[str, type[hashes.HashAlgorithm]]] = {
    'sha1': hashes.SHA1,
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
}


def hash_bytes(data: bytes, algorithm: str = 'sha256') -> str:
    """
    Hash raw bytes and return the lowercase hex digest.

    Args:
        data: Bytes to hash.
        algorithm: One of the keys of ALGORITHMS (case-insensitive).

    Returns:
        Hex-encoded digest.

    Raises:
        ValueError: If the algorithm is not supported.
    """
    try:
        algorithm_cls = ALGORITHMS[algorithm.lower()]
    except KeyError:
        supported = ', '.join(ALGORITHMS)
        msg = f'Unsupported hash algorithm {algorithm!r} (use: {supported})'
        raise ValueError(msg) from None

    digest = hashes.Hash(algorithm_cls())
    digest.update(data)
    return digest.finalize().hex()


def hash_text(text: str, algorithm: str = 'sha256') -> str:
    """Hash the UTF-8 encoding of ``text``."""
    return hash_bytes(text.encode('utf-8'), algorithm)


def hash_all(text: str) -> dict[str, str]:
    """Return every supported digest of ``text``, keyed by algorithm name."""
    return {name: hash_text(text, name) for name in ALGORITHMS}
