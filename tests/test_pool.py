import pytest

from spaceshooter.pool import POOL_SIZE, MemoryPool, PoolExhaustedError


def test_capacity_for_block_size():
    assert MemoryPool(64).capacity() == 16


def test_small_block_size_is_raised_to_minimum():
    pool = MemoryPool(1)
    assert pool.block_size == 8
    assert pool.capacity() * pool.block_size == POOL_SIZE


def test_allocate_until_exhausted():
    pool = MemoryPool(100)
    blocks = [pool.alloc() for _ in range(pool.capacity())]
    assert len(set(blocks)) == pool.capacity()
    assert pool.available() == 0
    with pytest.raises(PoolExhaustedError):
        pool.alloc()


def test_blocks_are_handed_out_in_arena_order():
    pool = MemoryPool(32)
    first = pool.alloc()
    second = pool.alloc()
    assert first == 0
    assert second == pool.block_size


def test_freed_block_is_reused_first():
    pool = MemoryPool(32)
    a = pool.alloc()
    pool.alloc()
    pool.free(a)
    assert pool.alloc() == a


def test_free_restores_availability():
    pool = MemoryPool(32)
    before = pool.available()
    block = pool.alloc()
    assert pool.available() == before - 1
    pool.free(block)
    assert pool.available() == before


def test_clear_frees_everything():
    pool = MemoryPool(128)
    for _ in range(pool.capacity()):
        pool.alloc()
    pool.clear()
    assert pool.available() == pool.capacity()
    assert pool.alloc() == 0


def test_double_free_rejected():
    pool = MemoryPool(32)
    block = pool.alloc()
    pool.free(block)
    with pytest.raises(ValueError):
        pool.free(block)


@pytest.mark.parametrize("bad", [3, -32, POOL_SIZE])
def test_foreign_block_rejected(bad):
    pool = MemoryPool(32)
    with pytest.raises(ValueError):
        pool.free(bad)


def test_oversized_block_rejected():
    with pytest.raises(ValueError):
        MemoryPool(POOL_SIZE + 1)