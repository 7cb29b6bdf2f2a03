"""Game state, asset loading and the main loop."""

import argparse
from enum import Enum, auto
from pathlib import Path

import pygame

from spaceshooter.objects import (
    PLAYER_TEXTURE,
    GameObject,
    Vector2,
    create_bullet,
    move_bullet,
    player_input,
    release_if_out_of_view,
)
from spaceshooter.pool import MemoryPool

G_WIDTH = 1080
G_HEIGHT = 1920
PLAYER_START_Y = 900.0
TARGET_FPS = 60
TITLE = "SpaceGame"
LIGHTGRAY = (200, 200, 200)
RED = (230, 41, 55)
_OBJECT_BLOCK_SIZE = 28  # texture id, position and rectangle, padded


class GameState(Enum):
    RUNNING = auto()
    PAUSE = auto()
    END = auto()


def load_assets(asset_dir):
    """Load the ship (flipped vertically) and bullet textures from asset_dir."""
    asset_dir = Path(asset_dir)
    textures = []
    for name, flip in (("Shippy.png", True), ("Star.png", False)):
        path = asset_dir / name
        if not path.is_file():
            raise FileNotFoundError(f"Failed to load '{name}'")
        image = pygame.image.load(str(path))
        if flip:
            image = pygame.transform.flip(image, False, True)
        textures.append(image)
    return textures


class Game:
    """The player ship and at most one bullet in flight."""

    def __init__(self, texture_sizes):
        self.texture_sizes = list(texture_sizes)
        self.game_state = GameState.RUNNING
        self.update_game = True
        self.player = GameObject(
            texture_id=PLAYER_TEXTURE,
            position=Vector2(G_WIDTH / 2, PLAYER_START_Y),
        )
        self.pool = MemoryPool(_OBJECT_BLOCK_SIZE)
        self.bullet = None

    def update(self, move_left, move_right, fire):
        """Advance one frame given the pressed controls."""
        player_input(self.player, move_left, move_right)
        self.player.update_rect(self.texture_sizes[self.player.texture_id])
        if fire and self.bullet is None:
            self.bullet = create_bullet(
                self.player, self.texture_sizes[1], self.pool
            )
        if self.bullet is not None:
            move_bullet(self.bullet, self.texture_sizes[self.bullet.texture_id])
            self.bullet = release_if_out_of_view(self.bullet, self.pool)

    def draw(self, surface, textures):
        """Render the frame onto surface."""
        surface.fill(LIGHTGRAY)
        player = self.player
        surface.blit(
            textures[player.texture_id],
            (int(player.position.x), int(player.position.y)),
        )
        rect = player.rect
        pygame.draw.rect(
            surface,
            RED,
            pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height)),
            1,
        )
        if self.bullet is not None:
            surface.blit(
                textures[self.bullet.texture_id],
                (int(self.bullet.position.x), int(self.bullet.position.y)),
            )


def main(argv=None):
    parser = argparse.ArgumentParser(prog="spaceshooter")
    parser.add_argument("assets", nargs="?", default="assets", help="asset directory")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((G_HEIGHT, G_WIDTH))
        pygame.display.set_caption(TITLE)
        textures = [t.convert_alpha() for t in load_assets(args.assets)]
        game = Game([t.get_size() for t in textures])
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            keys = pygame.key.get_pressed()
            game.update(keys[pygame.K_a], keys[pygame.K_d], keys[pygame.K_SPACE])
            game.draw(screen, textures)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0