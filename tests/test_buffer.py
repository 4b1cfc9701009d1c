import pytest

from ignis.buffer import Buffer


def test_empty_buffer_is_falsy_and_has_no_data():
    buf = Buffer()
    assert not buf
    assert len(buf) == 0
    assert buf.data is None


def test_buffer_from_size_is_zero_filled():
    buf = Buffer(16)
    assert buf
    assert len(buf) == 16
    assert bytes(buf) == bytes(16)


def test_buffer_from_bytes_keeps_contents():
    payload = b"\xff\xff\xff\xff"
    buf = Buffer(payload)
    assert bytes(buf) == payload
    assert buf.size == len(payload)


def test_allocate_replaces_contents():
    buf = Buffer(b"abc")
    buf.allocate(8)
    assert len(buf) == 8
    assert bytes(buf) == bytes(8)


def test_release_empties_buffer():
    buf = Buffer(b"data")
    buf.release()
    assert not buf
    assert len(buf) == 0
    assert bytes(buf) == b""


def test_copy_is_independent():
    original = Buffer(b"hello")
    duplicate = original.copy()
    assert bytes(duplicate) == bytes(original)
    duplicate.data[0] = ord("j")
    assert bytes(original) == b"hello"
    assert bytes(duplicate) == b"jello"


def test_copy_of_released_buffer_is_empty():
    buf = Buffer()
    assert not buf.copy()


def test_context_manager_releases_on_exit():
    with Buffer(4) as buf:
        assert len(buf) == 4
    assert not buf


def test_context_manager_releases_on_error():
    buf = Buffer(4)
    with pytest.raises(RuntimeError):
        with buf:
            raise RuntimeError("boom")
    assert not buf


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)
    with pytest.raises(ValueError):
        Buffer().allocate(-5)


@pytest.mark.parametrize("bad", [1.5, "text", True, [1, 2]])
def test_bad_data_rejected(bad):
    with pytest.raises(TypeError):
        Buffer(bad)