"""Basic drawing primitives for numpy RGB buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
) -> None:
    """Fill a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    buffer[y1:y2, x1:x2] = color


def draw_mask(
    buffer: Buffer,
    mask: NDArray[np.uint8],
    x: int,
    y: int,
    color: Color,
) -> None:
    """Blend a coverage mask onto the buffer in a solid color.

    Args:
        buffer: Target numpy array (height, width, 3)
        mask: Coverage array (height, width), 0 = transparent, 255 = opaque
        x: Top-left x coordinate
        y: Top-left y coordinate
        color: RGB color tuple
    """
    buf_h, buf_w = buffer.shape[:2]
    mask_h, mask_w = mask.shape[:2]

    # Calculate visible region
    src_x1 = max(0, -x)
    src_y1 = max(0, -y)
    src_x2 = min(mask_w, buf_w - x)
    src_y2 = min(mask_h, buf_h - y)

    if src_x2 <= src_x1 or src_y2 <= src_y1:
        return  # Nothing to draw

    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = dst_x1 + (src_x2 - src_x1)
    dst_y2 = dst_y1 + (src_y2 - src_y1)

    alpha = mask[src_y1:src_y2, src_x1:src_x2, np.newaxis] / 255.0
    dst_region = buffer[dst_y1:dst_y2, dst_x1:dst_x2]
    blended = np.asarray(color, dtype=np.float64) * alpha + dst_region * (1 - alpha)
    buffer[dst_y1:dst_y2, dst_x1:dst_x2] = np.rint(blended).astype(np.uint8)
