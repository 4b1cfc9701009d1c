"""Texture and framebuffer descriptions shared by every rendering back end."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable

__all__ = [
    "FramebufferSpec",
    "FramebufferTextureSpec",
    "RendererAPI",
    "TextureFilter",
    "TextureFormat",
    "TextureSpec",
    "TextureWrap",
    "is_depth_format",
    "split_attachments",
    "texture_attribute_count",
]


class RendererAPI(IntEnum):
    """Graphics interface a renderer draws through."""

    UNKNOWN = -1
    OPENGL = 0
    VULKAN = 1


class TextureFormat(IntEnum):
    """Pixel layout of a texture."""

    UNKNOWN = 0
    RED_INTEGER = 1
    RGB = 2
    RGB8 = 3
    RGBA = 4
    RGBA8 = 5
    RGBA16F = 6
    DEPTH = 7
    DEPTH24STENCIL8 = 8


class TextureWrap(Enum):
    CLAMP_TO_EDGE = 0
    REPEAT = 1


class TextureFilter(Enum):
    LINEAR = 0
    NEAREST = 1


_ATTRIBUTE_COUNTS = {
    TextureFormat.RGBA: 4,
    TextureFormat.RGBA8: 4,
    TextureFormat.RGBA16F: 4,
    TextureFormat.RGB: 3,
    TextureFormat.RGB8: 3,
    TextureFormat.RED_INTEGER: 1,
}

_DEPTH_FORMATS = frozenset({TextureFormat.DEPTH, TextureFormat.DEPTH24STENCIL8})


def texture_attribute_count(texture_format: TextureFormat) -> int:
    """Number of channels per pixel; 0 for depth and unknown formats."""
    return _ATTRIBUTE_COUNTS.get(TextureFormat(texture_format), 0)


def is_depth_format(texture_format: TextureFormat) -> bool:
    """True for formats that hold depth (and possibly stencil) values."""
    return TextureFormat(texture_format) in _DEPTH_FORMATS


@dataclass
class TextureSpec:
    """Size, format and sampling of a texture.

    Without an explicit channel count the format decides it.
    """

    format: TextureFormat = TextureFormat.RGBA8
    wrap_mode: TextureWrap = TextureWrap.CLAMP_TO_EDGE
    filter: TextureFilter = TextureFilter.LINEAR
    width: int = 1
    height: int = 1
    channels: int | None = None

    def __post_init__(self) -> None:
        self.format = TextureFormat(self.format)
        if self.channels is None:
            self.channels = texture_attribute_count(self.format)

    def expected_data_size(self) -> int:
        """Bytes needed to fill the whole texture with one byte per channel."""
        return self.width * self.height * texture_attribute_count(self.format)


@dataclass(frozen=True)
class FramebufferTextureSpec:
    """Format of one framebuffer attachment."""

    format: TextureFormat = TextureFormat.UNKNOWN


@dataclass
class FramebufferSpec:
    """Attachments, size and sampling of a framebuffer."""

    attachments: list[FramebufferTextureSpec] = field(default_factory=list)
    width: int = 0
    height: int = 0
    samples: int = 1
    depth_array_count: int = 0
    read_buffer: bool = False


def split_attachments(
    attachments: Iterable[FramebufferTextureSpec],
) -> tuple[list[FramebufferTextureSpec], FramebufferTextureSpec]:
    """Separate colour attachments from the depth attachment.

    Colour attachments keep their order. When several depth attachments are
    given the last one wins; with none, the depth spec has an unknown format.
    """
    colors: list[FramebufferTextureSpec] = []
    depth = FramebufferTextureSpec()
    for attachment in attachments:
        if is_depth_format(attachment.format):
            depth = attachment
        else:
            colors.append(attachment)
    return colors, depth