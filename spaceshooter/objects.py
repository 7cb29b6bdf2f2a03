"""Game objects: the player ship and its bullets."""

from dataclasses import dataclass, field

PLAYER_SPEED = 8.0
BULLET_SPEED = 4.0
OUT_OF_VIEW_Y = -10.0
PLAYER_TEXTURE = 0
BULLET_TEXTURE = 1


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class GameObject:
    """Something drawn with a texture at a position, with a bounding box."""

    texture_id: int = PLAYER_TEXTURE
    position: Vector2 = field(default_factory=Vector2)
    rect: Rect = field(default_factory=Rect)
    slot: int | None = None

    def update_rect(self, texture_size):
        """Fit the bounding box to the texture at the truncated position."""
        width, height = texture_size
        self.rect = Rect(int(self.position.x), int(self.position.y), width, height)


def player_input(obj, move_left, move_right):
    """Move an object horizontally by the player speed."""
    if move_right:
        obj.position.x += PLAYER_SPEED
    if move_left:
        obj.position.x -= PLAYER_SPEED


def create_bullet(player, texture_size, pool):
    """Spawn a bullet at the player's position, backed by a pool block."""
    slot = pool.alloc()
    width, height = texture_size
    position = Vector2(player.position.x, player.position.y)
    return GameObject(
        texture_id=BULLET_TEXTURE,
        position=position,
        rect=Rect(position.x, position.y, width, height),
        slot=slot,
    )


def move_bullet(bullet, texture_size):
    """Advance a bullet upwards and refit its bounding box."""
    bullet.position.y -= BULLET_SPEED
    bullet.update_rect(texture_size)


def release_if_out_of_view(bullet, pool):
    """Return the bullet, or None after freeing it once it has left the screen."""
    if bullet.position.y < OUT_OF_VIEW_Y:
        pool.free(bullet.slot)
        bullet.slot = None
        return None
    return bullet