"""Shared helpers for the engine tests."""

from __future__ import annotations

import io
from collections import deque

from PIL import Image

from slidecore.models.board import Board


def assert_permutation(board: Board) -> None:
    """The cells are exactly ``{1 .. N*N-1}`` plus one blank."""
    n = board.size
    assert len(board.cells) == n * n
    assert sorted(board.cells) == list(range(n * n))


def reachable_from_solved(size: int) -> set[tuple[int, ...]]:
    """Every arrangement reachable from the goal by sliding tiles (BFS)."""
    start = (*range(1, size * size), 0)
    seen = {start}
    queue = deque([start])
    while queue:
        cells = queue.popleft()
        e = cells.index(0)
        er, ec = divmod(e, size)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = er + dr, ec + dc
            if not (0 <= r < size and 0 <= c < size):
                continue
            t = r * size + c
            nxt = list(cells)
            nxt[e], nxt[t] = nxt[t], nxt[e]
            key = tuple(nxt)
            if key not in seen:
                seen.add(key)
                queue.append(key)
    return seen


def png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
