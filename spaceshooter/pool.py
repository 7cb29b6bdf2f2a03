"""Fixed-size block allocator over a single pre-sized arena."""

POOL_SIZE = 1024
_MIN_BLOCK_SIZE = 8  # a free block must be able to hold a link to the next one


class PoolExhaustedError(RuntimeError):
    """Raised when every block of the pool is in use."""


class MemoryPool:
    """Hands out equally sized blocks of a POOL_SIZE-byte arena.

    Blocks are identified by their byte offset in the arena. Freed blocks are
    reused first (last freed, first allocated).
    """

    def __init__(self, block_size):
        if block_size < 0:
            raise ValueError("block size must not be negative")
        if block_size > POOL_SIZE:
            raise ValueError(f"block size {block_size} exceeds pool size {POOL_SIZE}")
        self.block_size = max(block_size, _MIN_BLOCK_SIZE)
        self._free = []
        self._free_set = set()
        self.clear()

    def capacity(self):
        """Total number of blocks in the pool."""
        return POOL_SIZE // self.block_size

    def available(self):
        """Number of blocks currently free."""
        return len(self._free)

    def clear(self):
        """Mark every block as free again, in arena order."""
        offsets = range(0, self.capacity() * self.block_size, self.block_size)
        self._free = list(reversed(offsets))
        self._free_set = set(offsets)

    def alloc(self):
        """Take a free block and return its offset."""
        if not self._free:
            raise PoolExhaustedError("Pool exhaust")
        block = self._free.pop()
        self._free_set.discard(block)
        return block

    def free(self, block):
        """Return a block to the pool; it is the next one handed out."""
        if block % self.block_size or not 0 <= block < self.capacity() * self.block_size:
            raise ValueError(f"{block} is not a block of this pool")
        if block in self._free_set:
            raise ValueError(f"block {block} is already free")
        self._free.append(block)
        self._free_set.add(block)