from os import urandom

from kdf.errors import RandomSourceError


def generate_random_bytes(length: int) -> bytes:
    """``length`` bytes from the OS CSPRNG, or RandomSourceError."""
    try:
        data = urandom(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"could not read {length} random bytes: {exc}") from exc
    if len(data) != length:
        raise RandomSourceError(f"random source returned {len(data)} of {length} bytes")
    return data
