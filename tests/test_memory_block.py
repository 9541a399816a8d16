import pytest

from hexblock.memory_block import MemoryBlock


def test_empty_block_has_no_buffer():
    block = MemoryBlock()
    assert block.size() == 0
    assert block.data() is None


def test_zero_size_with_source_is_empty():
    block = MemoryBlock(0, b"abc")
    assert block.size() == 0
    assert block.data() is None


def test_source_is_copied():
    block = MemoryBlock(3, b"abcdef")
    assert block.size() == 3
    assert bytes(block.data()) == b"abc"


def test_without_source_block_is_zeroed_including_padding():
    block = MemoryBlock(5, None, 3)
    assert block.size() == 5
    assert bytes(block.data()) == bytes(8)


def test_padding_follows_source_data():
    block = MemoryBlock(2, b"xy", 4)
    data = block.data()
    assert len(data) == 6
    assert bytes(data[:2]) == b"xy"
    assert bytes(data[2:]) == bytes(4)


def test_source_too_short_raises():
    with pytest.raises(ValueError):
        MemoryBlock(10, b"abc")


def test_negative_size_raises():
    with pytest.raises(ValueError):
        MemoryBlock(-1)


def test_negative_padding_raises():
    with pytest.raises(ValueError):
        MemoryBlock(4, None, -2)


def test_create_replaces_contents():
    block = MemoryBlock(4, b"abcd")
    block.create(2, b"zz")
    assert block.size() == 2
    assert bytes(block.data()) == b"zz"


def test_create_zero_empties_block():
    block = MemoryBlock(4, b"abcd")
    block.create(0)
    assert block.size() == 0
    assert block.data() is None


def test_delete_releases_buffer():
    block = MemoryBlock(4, b"abcd")
    block.delete()
    assert block.size() == 0
    assert block.data() is None


def test_copy_is_independent():
    original = MemoryBlock(3, b"abc")
    duplicate = original.copy()
    duplicate.data()[0] = ord("z")
    assert bytes(original.data()) == b"abc"
    assert bytes(duplicate.data()) == b"zbc"


def test_copy_drops_padding():
    original = MemoryBlock(3, b"abc", 5)
    duplicate = original.copy()
    assert duplicate.size() == 3
    assert len(duplicate.data()) == 3


def test_copy_of_empty_block_is_empty():
    duplicate = MemoryBlock().copy()
    assert duplicate.size() == 0
    assert duplicate.data() is None


def test_create_aligned_rounds_up():
    block = MemoryBlock()
    block.create_aligned(5, 4)
    assert block.size() == 8


def test_create_aligned_keeps_aligned_size():
    block = MemoryBlock()
    block.create_aligned(12, 4)
    assert block.size() == 12


@pytest.mark.parametrize("unaligned", range(1, 40))
@pytest.mark.parametrize("alignment", [1, 3, 8, 16])
def test_create_aligned_invariant(unaligned, alignment):
    block = MemoryBlock()
    block.create_aligned(unaligned, alignment)
    size = block.size()
    assert size % alignment == 0
    assert unaligned <= size < unaligned + alignment


def test_create_aligned_zero_alignment_raises():
    with pytest.raises(ValueError):
        MemoryBlock().create_aligned(5, 0)


def test_create_aligned_with_source_needs_enough_bytes():
    with pytest.raises(ValueError):
        MemoryBlock().create_aligned(5, 4, b"abcde")


def test_create_aligned_with_source_and_padding():
    block = MemoryBlock()
    block.create_aligned(3, 4, b"abcd", 2)
    assert bytes(block.data()) == b"abcd" + bytes(2)