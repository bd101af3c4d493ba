"""
Image export for rendered textures.

PNG keeps the alpha channel, JPG stores RGB only. Rows are flipped on the
way out because image files store the top row first while a PixelBuffer
stores the bottom row first.
"""
from __future__ import annotations

import io
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from .gradients.pixel_buffer import PixelBuffer


class FileType(str, Enum):
    PNG = "png"
    JPG = "jpg"

    @property
    def suffix(self) -> str:
        return "." + self.value

    @classmethod
    def from_suffix(cls, suffix: str) -> FileType:
        ext = suffix.lower().lstrip(".")
        if ext == "jpeg":
            ext = "jpg"
        try:
            return cls(ext)
        except ValueError:
            raise ValueError(f"Unsupported image type: {suffix!r}") from None


_PIL_FORMATS = {
    FileType.PNG: "PNG",
    FileType.JPG: "JPEG",
}


def to_image(buffer: PixelBuffer) -> Image.Image:
    """RGBA 8-bit Pillow image with the texture's top row first."""
    return Image.fromarray(np.ascontiguousarray(buffer.to_uint8(top_down=True)))


def encode_texture(buffer: PixelBuffer, file_type: FileType = FileType.PNG, quality: int = 75) -> bytes:
    """Encode a texture to PNG or JPG bytes."""
    file_type = FileType(file_type)
    image = to_image(buffer)
    out = io.BytesIO()
    if file_type is FileType.JPG:
        image.convert("RGB").save(out, format=_PIL_FORMATS[file_type], quality=quality)
    else:
        image.save(out, format=_PIL_FORMATS[file_type])
    return out.getvalue()


def save_texture(
    buffer: PixelBuffer,
    path: Union[str, Path],
    file_type: Optional[FileType] = None,
) -> Path:
    """
    Write a texture to disk.

    The file type is inferred from the suffix when not given; the matching
    suffix is appended when the path has none.

    Returns:
        The path written
    """
    path = Path(path)
    if file_type is None:
        file_type = FileType.from_suffix(path.suffix) if path.suffix else FileType.PNG
    file_type = FileType(file_type)
    if not path.suffix:
        path = path.with_suffix(file_type.suffix)
    path.write_bytes(encode_texture(buffer, file_type))
    return path
