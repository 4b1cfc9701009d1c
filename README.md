# ignis

Building blocks for a small 2D game engine and its editor. They are plain
Python objects and need no window or graphics context.

## What is inside

| Module | Contents |
| --- | --- |
| `ignis.keycodes` | `KeyCode` values for every key, the shorter `Key` names, `EXTENDED_MASK`, `SCANCODE_MASK` and `scancode_to_keycode` |
| `ignis.modifiers` | `KeyMod` modifier flags, `MouseButton` (with its `mask` property) and `button_mask` |
| `ignis.identifiers` | `UUID`, a 64-bit identifier that is random unless you give it a value. It compares and hashes like its integer value. |
| `ignis.buffer` | `Buffer`, a block of bytes with `allocate`, `release` and `copy`. Used as a context manager, it releases its bytes on exit. |
| `ignis.events` | `Event` and its window, key and mouse kinds, plus `EventType`, `EventCategory` and `EventDispatcher` |
| `ignis.input` | `InputState`, which records the keys, modifiers and mouse buttons held down and the mouse position |
| `ignis.geometry` | `Rect`, `Margin`, `AABB`, `OBB` and `Anchor`, with quaternion and matrix helpers: `quat_from_euler`, `quat_to_mat3`, `quat_to_mat4`, `rotate`, `euler_angles`, `translation_matrix`, `scale_matrix`, `ortho` |
| `ignis.components` | Scene components `ID`, `Transform` and `Sprite` |
| `ignis.camera` | `Camera` and `CameraType`. A 2D camera zooms and pans in response to held keys and scroll events. |
| `ignis.textures` | `TextureSpec`, `TextureFormat`, `TextureWrap`, `TextureFilter`, `FramebufferTextureSpec`, `FramebufferSpec`, `RendererAPI`, `texture_attribute_count`, `is_depth_format` and `split_attachments` |
| `ignis.layout` | `ShaderDataType`, `BufferElement`, `BufferLayout`, `VertexAttribute`, `shader_data_type_size` and `vertex_attributes` |
| `ignis.content_browser` | `ContentBrowser`, `ContentItem`, `SortSpec`, `sort_items` and `DeletionSelection` |

Quaternions are numpy arrays ordered `(w, x, y, z)`. Matrices act on column vectors, so `m @ v` transforms `v`.

## Installing

```
pip install .
```

## Examples

Dispatching an event:

```python
from ignis.events import EventDispatcher, MouseScrolledEvent

event = MouseScrolledEvent(0.0, 1.0)
EventDispatcher(event).dispatch(MouseScrolledEvent, lambda e: True)
assert event.handled
```

Driving a 2D camera:

```python
from ignis.camera import Camera, CameraType
from ignis.input import InputState
from ignis.keycodes import Key

camera = Camera(CameraType.TWO_D, 1280, 720, (0.0, 0.0, 1.0))
state = InputState()
state.set_key(Key.D, True)
camera.on_update(0.016, state, False)
matrix = camera.view_projection()
```

Describing a vertex layout:

```python
from ignis.layout import BufferElement, BufferLayout, ShaderDataType, vertex_attributes

layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT2, "position"),
    BufferElement(ShaderDataType.FLOAT2, "texture_coord"),
])
assert layout.stride == 16
assert [a.offset for a in vertex_attributes(layout)] == [0, 8]
```

Casting a ray at a box:

```python
from ignis.geometry import AABB

box = AABB.from_center((0.0, 0.0, 0.0), (2.0, 2.0, 2.0))
assert box.ray_intersection((0.0, 0.0, -5.0), (0.0, 0.0, 1.0))
```

## What it does not do

The package does not open windows, read input from the operating system, or
draw anything. Textures, framebuffers and vertex layouts are described here,
but nothing sends them to a graphics device. It has no scene or entity
registry, no scene manager, no asset storage, and no editor screens. Your own
code has to feed `InputState` and the event classes and consume their results.

## Running the tests

```
pip install .[test]
pytest
```