import pytest

from ignis.layout import (
    BufferElement,
    BufferLayout,
    ShaderDataType,
    shader_data_type_size,
    vertex_attributes,
)


@pytest.mark.parametrize(
    "data_type, size",
    [
        (ShaderDataType.FLOAT, 4),
        (ShaderDataType.FLOAT2, 4 * 2),
        (ShaderDataType.FLOAT3, 4 * 3),
        (ShaderDataType.FLOAT4, 4 * 4),
        (ShaderDataType.MAT2, 4 * 2 * 2),
        (ShaderDataType.MAT3, 4 * 3 * 3),
        (ShaderDataType.MAT4, 4 * 4 * 4),
        (ShaderDataType.INT, 4),
        (ShaderDataType.INT2, 4 * 2),
        (ShaderDataType.INT3, 4 * 3),
        (ShaderDataType.INT4, 4 * 4),
        (ShaderDataType.BOOL, 1),
        (ShaderDataType.UNKNOWN, 0),
    ],
)
def test_type_sizes(data_type, size):
    assert shader_data_type_size(data_type) == size


@pytest.mark.parametrize(
    "data_type, count",
    [
        (ShaderDataType.FLOAT, 1),
        (ShaderDataType.FLOAT3, 3),
        (ShaderDataType.MAT2, 2),
        (ShaderDataType.MAT3, 3),
        (ShaderDataType.MAT4, 4),
        (ShaderDataType.INT2, 2),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_component_counts(data_type, count):
    assert BufferElement(data_type, "x").component_count() == count


def test_unknown_component_count_raises():
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.UNKNOWN, "bad").component_count()


def test_element_size_follows_type():
    element = BufferElement(ShaderDataType.FLOAT3, "normal", normalized=True)
    assert element.size == shader_data_type_size(ShaderDataType.FLOAT3)
    assert element.offset == 0
    assert element.normalized is True


def _quad_layout():
    return BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT2, "position"),
            BufferElement(ShaderDataType.FLOAT2, "texture_coord"),
            BufferElement(ShaderDataType.FLOAT4, "color"),
        ]
    )


def test_offsets_accumulate_and_stride_is_total():
    layout = _quad_layout()
    elements = list(layout)
    assert [e.name for e in elements] == ["position", "texture_coord", "color"]
    running = 0
    for element in elements:
        assert element.offset == running
        running += element.size
    assert layout.stride == running
    assert len(layout) == 3


def test_layout_does_not_change_given_elements():
    first = BufferElement(ShaderDataType.FLOAT4, "a")
    second = BufferElement(ShaderDataType.FLOAT4, "b")
    layout = BufferLayout([first, second])
    assert second.offset == 0
    assert layout.elements[1].offset == first.size


def test_empty_layout():
    layout = BufferLayout()
    assert layout.stride == 0
    assert len(layout) == 0
    assert vertex_attributes(layout) == []


def test_float_attributes_one_slot_each():
    layout = _quad_layout()
    attributes = vertex_attributes(layout)
    assert [a.index for a in attributes] == [0, 1, 2]
    assert [a.offset for a in attributes] == [e.offset for e in layout]
    assert all(a.stride == layout.stride for a in attributes)
    assert all(not a.integer and a.divisor == 0 for a in attributes)


def test_start_index_shifts_slots():
    attributes = vertex_attributes(_quad_layout(), start_index=5)
    assert [a.index for a in attributes] == [5, 6, 7]


def test_integer_attributes_are_not_normalized():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.INT, "entity", normalized=True),
            BufferElement(ShaderDataType.BOOL, "flag"),
        ]
    )
    attributes = vertex_attributes(layout)
    assert all(a.integer for a in attributes)
    assert all(not a.normalized for a in attributes)


def test_matrix_takes_one_instanced_slot_per_column():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT, "weight"),
            BufferElement(ShaderDataType.MAT4, "model"),
        ]
    )
    attributes = vertex_attributes(layout)
    matrix = attributes[1:]
    assert len(matrix) == BufferElement(ShaderDataType.MAT4, "m").component_count()
    assert all(a.divisor == 1 and a.component_count == len(matrix) for a in matrix)
    assert matrix[0].offset == layout.elements[1].offset
    column = shader_data_type_size(ShaderDataType.FLOAT4)
    for before, after in zip(matrix, matrix[1:]):
        assert after.offset - before.offset == column
        assert after.index == before.index + 1


def test_unknown_element_raises():
    layout = BufferLayout([BufferElement(ShaderDataType.UNKNOWN, "mystery")])
    with pytest.raises(ValueError):
        vertex_attributes(layout)