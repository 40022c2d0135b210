"""Engine-wide constants and size validation."""

from __future__ import annotations

from slidecore.errors import InvalidSizeError

EMPTY = 0

MIN_SIZE = 2
DEFAULT_SIZE = 3
GAME_SIZES: tuple[int, ...] = (3, 4, 5)

# Shuffle attempts before the generator falls back to a fixed scramble.
MAX_SHUFFLE_ATTEMPTS = 2000

# Cell swaps applied (in order) to the solved board by the fallback path.
# Together they form a 3-cycle of tiles 1, 2, 3, which is always solvable.
FALLBACK_SWAPS: tuple[tuple[int, int], ...] = ((0, 1), (1, 2))


def validate_size(size: int) -> int:
    """Return *size* unchanged, or raise :class:`InvalidSizeError`."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"Board size must be an integer, got {size!r}.")
    if size < MIN_SIZE:
        raise InvalidSizeError(
            f"Board size must be at least {MIN_SIZE}, got {size}."
        )
    return size
