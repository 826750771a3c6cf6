"""
Reader and writer for the Portable Float Map (PFM) raster format.

Layout:
    PF | Pf          3-channel color or 1-channel grayscale
    <w> <h>          image size as decimal text
    <scale>          negative scale means little-endian pixel data
    <binary>         w * h * channels 32-bit floats, row-major
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np

_HEADERS = {"PF": 3, "Pf": 1}


def tex2pixel(u: float, n: int) -> int:
    """Map a texture coordinate in [0, 1] to a pixel index in [0, n)."""
    return min(max(int(np.floor(u * n)), 0), n - 1)


@dataclass
class PFMImage:
    """
    Floating-point raster image.

    Attributes
    ----------
    data : np.ndarray
        Flat float32 pixel values, length w * h * channels
    w : int
        Width in pixels
    h : int
        Height in pixels
    channels : int
        1 (grayscale) or 3 (RGB)
    little_endian : bool
        Byte order used when saving
    """

    data: np.ndarray
    w: int
    h: int
    channels: int
    little_endian: bool = False

    @classmethod
    def create_image(cls, channels: int, w: int, h: int) -> "PFMImage":
        """Create a black image."""
        if channels not in (1, 3):
            raise ValueError("channels must be 1 or 3")
        if w <= 0 or h <= 0:
            raise ValueError("image size must be positive")
        return cls(np.zeros(w * h * channels, dtype=np.float32), w, h, channels)

    @classmethod
    def read_from(cls, path: str | Path) -> "PFMImage":
        """
        Read a PFM file.

        Parameters
        ----------
        path : str | Path
            File to read

        Returns
        -------
        PFMImage
            Decoded image; `little_endian` reflects the file's byte order
        """
        with open(path, "rb") as f:
            header = f.readline().decode("ascii").strip()
            if header not in _HEADERS:
                raise ValueError("Invalid header of PFM")
            channels = _HEADERS[header]

            dims = f.readline().decode("ascii").split()
            if len(dims) != 2:
                raise ValueError("Invalid dimensions format")
            try:
                w, h = int(dims[0]), int(dims[1])
            except ValueError:
                raise ValueError(f"Invalid dimensions: {' '.join(dims)}") from None
            if w < 0 or h < 0:
                raise ValueError(f"Invalid dimensions: {w} {h}")

            scale_line = f.readline().decode("ascii").strip()
            try:
                scale = float(scale_line)
            except ValueError:
                raise ValueError(f"Invalid scale factor: {scale_line}") from None
            little_endian = scale < 0.0

            n_values = w * h * channels
            buffer = f.read(n_values * 4)
            if len(buffer) != n_values * 4:
                raise ValueError(
                    f"Truncated pixel data: expected {n_values * 4} bytes, got {len(buffer)}"
                )

        dtype = "<f4" if little_endian else ">f4"
        data = np.frombuffer(buffer, dtype=dtype).astype(np.float32)
        return cls(data, w, h, channels, little_endian)

    def save_to(self, path: str | Path) -> None:
        """Write the image as PFM, using `little_endian` for the byte order."""
        header = {3: "PF", 1: "Pf"}.get(self.channels)
        if header is None:
            raise ValueError("Invalid number of channels")

        scale = -1.0 if self.little_endian else 1.0
        dtype = "<f4" if self.little_endian else ">f4"
        with open(path, "wb") as f:
            f.write(f"{header}\n{self.w} {self.h}\n{scale}\n".encode("ascii"))
            f.write(np.asarray(self.data, dtype=dtype).tobytes())

    def _offset(self, u: float, v: float) -> int:
        i_w = tex2pixel(u, self.w)
        i_h = tex2pixel(v, self.h)
        return self.channels * (i_h * self.w + i_w)

    def get_color(self, u: float, v: float) -> tuple[float, float, float]:
        """Color at texture coordinate (u, v); grayscale is replicated to RGB."""
        i = self._offset(u, v)
        if self.channels == 3:
            r, g, b = self.data[i : i + 3]
            return float(r), float(g), float(b)
        g = float(self.data[i])
        return g, g, g

    def set_color(self, col, u: float, v: float) -> None:
        """Set the pixel at (u, v); grayscale images keep the first component."""
        i = self._offset(u, v)
        if self.channels == 3:
            self.data[i : i + 3] = col[:3]
        else:
            self.data[i] = col[0]
