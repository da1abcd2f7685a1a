"""In-memory pixel images laid out like a ZPixmap, and visual channel masks."""

from __future__ import annotations

LSB_FIRST = 0
MSB_FIRST = 1

BITMAP_PAD = 32
_SUPPORTED_DEPTHS = (8, 16, 24, 32)


class Image:
    """A zero-filled pixel buffer with a padded row stride.

    Each row takes ``size_line`` bytes, rounded up to a 32-bit boundary.
    Pixels are stored with ``bits_per_pixel // 8`` bytes each, least
    significant byte first when ``byte_order`` is 0 and most significant
    first when it is 1.
    """

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        byte_order: int = LSB_FIRST,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("image width and height must be positive")
        if bits_per_pixel not in _SUPPORTED_DEPTHS:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        if byte_order not in (LSB_FIRST, MSB_FIRST):
            raise ValueError("byte_order must be 0 (LSB first) or 1 (MSB first)")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.byte_order = byte_order
        padded_bits = -(-(width * bits_per_pixel) // BITMAP_PAD) * BITMAP_PAD
        self.size_line = padded_bits // 8
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _endian(self) -> str:
        return "big" if self.byte_order == MSB_FIRST else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping only the bytes a pixel holds."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (opp * 8)) - 1)
        self.data[offset : offset + opp] = value.to_bytes(opp, self._endian())

    def get_pixel(self, x: int, y: int) -> int:
        """Read the unsigned pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + opp], self._endian())

    def __repr__(self) -> str:
        return (
            f"Image({self.width}x{self.height}, bpp={self.bits_per_pixel}, "
            f"size_line={self.size_line}, byte_order={self.byte_order})"
        )


def _mask_shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("channel mask must be a positive integer")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    width = (rest ^ (rest + 1)).bit_length() - 1
    return shift, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    The shift is the number of zero bits below each mask and the width is
    the length of the run of one bits that follows.
    """
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        result.extend(_mask_shift_and_width(mask))
    return tuple(result)