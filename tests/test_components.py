import numpy as np
import pytest

from ignis.components import ID, Sprite, Transform
from ignis.geometry import quat_from_euler, quat_to_mat4
from ignis.identifiers import UUID

IDENTITY = (1.0, 0.0, 0.0, 0.0)


def test_default_id():
    comp = ID()
    assert comp.name == "untitled"
    assert comp.uuid == UUID(0)
    assert comp.children == []


def test_named_id_keeps_given_uuid():
    comp = ID("player", 42)
    assert comp.name == "player"
    assert int(comp.uuid) == 42


def test_named_ids_get_distinct_uuids():
    a = ID("a")
    b = ID("b")
    assert a.name == "a" and b.name == "b"
    assert a.uuid != b.uuid


def test_children_not_shared():
    a = ID("a")
    b = ID("b")
    a.children.append(UUID(7))
    assert b.children == []


def test_default_transform_matrix_is_its_rotation():
    tr = Transform()
    assert np.allclose(tr.world_transform(), quat_to_mat4(tr.world_rotation))


def test_world_transform_places_origin_at_translation():
    tr = Transform(world_translation=(1.0, 2.0, 3.0), world_rotation=IDENTITY)
    origin = tr.world_transform() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(origin[:3], (1.0, 2.0, 3.0))


def test_world_transform_scales_when_unrotated():
    tr = Transform(world_rotation=IDENTITY, world_scale=(2.0, 3.0, 4.0))
    assert np.allclose(tr.world_transform()[:3, :3], np.diag((2.0, 3.0, 4.0)))


def test_local_transform_default_is_identity():
    assert np.allclose(Transform().local_transform(), np.eye(4))


def test_euler_rotation_round_trips():
    angles = (0.2, -0.4, 0.6)
    tr = Transform(world_rotation=quat_from_euler(angles), local_rotation=quat_from_euler(angles))
    assert np.allclose(tr.world_euler_rotation(), angles)
    assert np.allclose(tr.local_euler_rotation(), angles)


def test_transform_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Transform(world_translation=(1.0, 2.0))


def test_sprite_defaults_and_color():
    sprite = Sprite()
    assert np.allclose(sprite.color, (1.0, 1.0, 1.0, 1.0))
    assert sprite.texture is None
    red = Sprite(color=(1.0, 0.0, 0.0, 1.0))
    assert np.allclose(red.color, (1.0, 0.0, 0.0, 1.0))