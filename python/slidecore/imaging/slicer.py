"""Slices an uploaded picture into per-tile image fragments.

Kept apart from the engine: nothing under ``slidecore.engine`` imports
this module, and Pillow is only needed when a picture is actually used.
"""

from __future__ import annotations

import io
import itertools
import logging
from dataclasses import dataclass, field
from typing import Protocol

from PIL import Image, UnidentifiedImageError

from slidecore.config import validate_size

logger = logging.getLogger(__name__)


@dataclass
class SliceResult:
    """Fragments keyed by tile id, or the reason slicing failed."""

    ok: bool
    fragments: dict[int, Image.Image] = field(default_factory=dict)
    error: str | None = None
    request_id: int | None = None

    @classmethod
    def failure(cls, error: str) -> SliceResult:
        return cls(ok=False, error=error)


class ImageSlicer(Protocol):
    """Anything that can turn image bytes into tile fragments."""

    def slice(self, image_bytes: bytes, size: int) -> SliceResult: ...


def crop_center_square(img: Image.Image) -> Image.Image:
    """Crop the largest centred square out of *img*."""
    w, h = img.size
    side = min(w, h)
    left = (w - side) // 2
    top = (h - side) // 2
    return img.crop((left, top, left + side, top + side))


class PillowSlicer:
    """Default :class:`ImageSlicer` backed by Pillow."""

    def slice(self, image_bytes: bytes, size: int) -> SliceResult:
        validate_size(size)
        try:
            with Image.open(io.BytesIO(image_bytes)) as raw:
                img = raw.convert("RGB")
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            logger.warning("Could not decode puzzle image: %s", exc)
            return SliceResult.failure(f"Could not decode image: {exc}")

        square = crop_center_square(img)
        tpx = square.width // size
        if tpx == 0:
            return SliceResult.failure(
                f"Image of {img.width}x{img.height} px is too small for a "
                f"{size}x{size} grid."
            )

        fragments: dict[int, Image.Image] = {}
        for val in range(1, size * size):
            # Tile value v sits at ((v-1)//size, (v-1)%size) when solved.
            tr, tc = divmod(val - 1, size)
            box = (tc * tpx, tr * tpx, (tc + 1) * tpx, (tr + 1) * tpx)
            fragments[val] = square.crop(box)

        logger.debug("Sliced image into %d fragments of %d px", len(fragments), tpx)
        return SliceResult(ok=True, fragments=fragments)


class SliceRequestTracker:
    """Last-write-wins bookkeeping for image uploads.

    Each upload takes a fresh id from :meth:`begin`; a result is kept by
    :meth:`accept` only if no newer upload has started since.
    """

    def __init__(self, slicer: ImageSlicer | None = None) -> None:
        self.slicer: ImageSlicer = slicer if slicer is not None else PillowSlicer()
        self._ids = itertools.count(1)
        self.latest_id = 0
        self.current: SliceResult | None = None

    def begin(self) -> int:
        self.latest_id = next(self._ids)
        return self.latest_id

    def accept(self, result: SliceResult) -> bool:
        if result.request_id != self.latest_id:
            logger.debug(
                "Discarding stale slice result %s (latest is %d)",
                result.request_id,
                self.latest_id,
            )
            return False
        self.current = result
        return True

    def run(self, image_bytes: bytes, size: int) -> SliceResult:
        """Slice synchronously under a fresh request id and keep the result."""
        request_id = self.begin()
        result = self.slicer.slice(image_bytes, size)
        result.request_id = request_id
        self.accept(result)
        return result


_default_slicer = PillowSlicer()


def slice_image(image_bytes: bytes, size: int) -> SliceResult:
    """Slice *image_bytes* into ``size*size - 1`` fragments keyed by tile id."""
    return _default_slicer.slice(image_bytes, size)
