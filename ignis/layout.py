"""Vertex buffer layouts and the vertex attributes they describe."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Iterable, Iterator

__all__ = [
    "BufferElement",
    "BufferLayout",
    "ShaderDataType",
    "VertexAttribute",
    "shader_data_type_size",
    "vertex_attributes",
]

_FLOAT_SIZE = 4


class ShaderDataType(IntEnum):
    UNKNOWN = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT2 = 5
    MAT3 = 6
    MAT4 = 7
    INT = 8
    INT2 = 9
    INT3 = 10
    INT4 = 11
    BOOL = 12


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT2: 4 * 2 * 2,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT2: 2,
    ShaderDataType.MAT3: 3,
    ShaderDataType.MAT4: 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}

_FLOAT_TYPES = frozenset(
    {ShaderDataType.FLOAT, ShaderDataType.FLOAT2, ShaderDataType.FLOAT3, ShaderDataType.FLOAT4}
)
_INTEGER_TYPES = frozenset(
    {
        ShaderDataType.INT,
        ShaderDataType.INT2,
        ShaderDataType.INT3,
        ShaderDataType.INT4,
        ShaderDataType.BOOL,
    }
)
_MATRIX_TYPES = frozenset({ShaderDataType.MAT2, ShaderDataType.MAT3, ShaderDataType.MAT4})


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``; 0 when unknown."""
    return _SIZES.get(ShaderDataType(data_type), 0)


@dataclass
class BufferElement:
    """One named attribute inside a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.data_type = ShaderDataType(self.data_type)
        self.size = shader_data_type_size(self.data_type)

    def component_count(self) -> int:
        """Components per value; matrices count their columns."""
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"unknown shader data type {self.data_type!r}") from None


class BufferLayout:
    """Ordered vertex elements with their byte offsets and the vertex stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        placed: list[BufferElement] = []
        offset = 0
        for element in elements:
            copy = replace(element)
            copy.offset = offset
            offset += copy.size
            placed.append(copy)
        self._elements = tuple(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        """Bytes from one vertex to the next."""
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r}, stride={self._stride})"


@dataclass(frozen=True)
class VertexAttribute:
    """One attribute slot a vertex array enables for a layout element."""

    index: int
    component_count: int
    data_type: ShaderDataType
    normalized: bool
    integer: bool
    stride: int
    offset: int
    divisor: int = 0


def vertex_attributes(layout: BufferLayout, start_index: int = 0) -> list[VertexAttribute]:
    """The attribute slots a layout occupies, numbered from ``start_index``.

    Float vectors take one slot, integer and boolean vectors one integer
    slot, and matrices one per-instance slot per column.
    """
    attributes: list[VertexAttribute] = []
    index = start_index
    stride = layout.stride
    for element in layout:
        kind = element.data_type
        if kind in _FLOAT_TYPES or kind in _INTEGER_TYPES:
            integer = kind in _INTEGER_TYPES
            attributes.append(
                VertexAttribute(
                    index=index,
                    component_count=element.component_count(),
                    data_type=kind,
                    normalized=element.normalized and not integer,
                    integer=integer,
                    stride=stride,
                    offset=element.offset,
                )
            )
            index += 1
        elif kind in _MATRIX_TYPES:
            count = element.component_count()
            for column in range(count):
                attributes.append(
                    VertexAttribute(
                        index=index,
                        component_count=count,
                        data_type=kind,
                        normalized=element.normalized,
                        integer=False,
                        stride=stride,
                        offset=element.offset + _FLOAT_SIZE * count * column,
                        divisor=1,
                    )
                )
                index += 1
        else:
            raise ValueError(f"element {element.name!r} has an unknown shader data type")
    return attributes