from slidecore.imaging.slicer import (
    ImageSlicer,
    PillowSlicer,
    SliceRequestTracker,
    SliceResult,
    crop_center_square,
    slice_image,
)

__all__ = [
    "ImageSlicer",
    "PillowSlicer",
    "SliceRequestTracker",
    "SliceResult",
    "crop_center_square",
    "slice_image",
]
