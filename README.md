# spaceshooter

A small arcade space shooter built on pygame. You steer a ship left and right
and fire a single bullet at a time. The bullet travels upward until it leaves
the view.

## Installing

```
pip install .
```

## Playing

```
spaceshooter
```

By default the game loads its images from an `assets` directory in the current
working directory. To use another directory, pass its path:

```
spaceshooter path/to/assets
```

The directory must hold `Shippy.png` (the ship, drawn flipped vertically) and
`Star.png` (the bullet). If either file is missing, the command fails with
`FileNotFoundError`.

The window is 1920×1080 and titled "SpaceGame". The game runs at up to 60
frames per second.

Controls:

- `A` moves the ship left by 8 pixels per frame
- `D` moves the ship right by 8 pixels per frame
- `Space` fires a bullet, but only when no other bullet is on screen
- `Escape` or closing the window quits

A red outline marks the ship's bounding box. A bullet moves up 4 pixels per
frame. Once it is above the top of the screen (y below -10), it is removed and
the ship can fire again.

## What the game does not do

There are no enemies, no collisions, no score and no pause. The `GameState`
enum names `RUNNING`, `PAUSE` and `END`, but a `Game` stays in `RUNNING` and
nothing moves it to the other states.

## Using the pieces

The modules can also be used on their own.

- `spaceshooter.pool`: `MemoryPool(block_size)` splits a 1024-byte arena into
  equal blocks.
  - Block sizes below 8 are raised to 8. Negative sizes, or sizes larger than
    the arena, raise `ValueError`.
  - `alloc()` returns a free block's offset. When no block is free it raises
    `PoolExhaustedError`.
  - `free(block)` returns a block to the pool, and that block is the next one
    handed out. Offsets that are not blocks of the pool raise `ValueError`, and
    so does freeing a block twice.
  - `clear()` frees every block.
  - `capacity()` and `available()` give the total number of blocks and the
    number of free ones.
- `spaceshooter.dlist`: `DList` is a doubly linked list of `DNode(value)`
  nodes, starting at `head`.
  - `insert_head` and `insert_after` add nodes.
  - `find(value)` returns the first matching node, or `None`.
  - `remove(node)` unlinks a node.
  - `detach(node)` unlinks a node and returns it. It raises `ValueError` if the
    node is not in the list.
  - `clear()` empties the list.
  - The list supports iteration and `len()`.
- `spaceshooter.objects`: `Vector2`, `Rect` and `GameObject` are dataclasses.
  - `GameObject.update_rect(texture_size)` fits the bounding box to a
    `(width, height)` at the truncated position.
  - `player_input` moves an object left or right.
  - `create_bullet` places a bullet at the player's position and takes a pool
    block for it.
  - `move_bullet` moves a bullet upward.
  - `release_if_out_of_view` frees the bullet's block and returns `None` once
    the bullet is off screen. Otherwise it returns the bullet.
- `spaceshooter.game`:
  - `Game(texture_sizes)` holds the player, at most one `bullet` and a pool.
  - `update(move_left, move_right, fire)` advances one frame.
  - `draw(surface, textures)` renders the frame onto a pygame surface.
  - `load_assets(asset_dir)` loads the two textures.
  - `main(argv=None)` runs the game.

```python
from spaceshooter.game import Game

game = Game(texture_sizes=[(64, 64), (16, 16)])
game.update(move_left=False, move_right=True, fire=True)
print(game.player.position, game.bullet.position)
```

## Running the tests

```
pip install ".[test]"
pytest
```