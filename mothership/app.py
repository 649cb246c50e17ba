"""Window, camera and main loop of the game."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from typing import Any

import numpy as np
import pygame

from .controls import Key, handle_controls
from .game_object import GameObject
from .particle_system import ParticleSystem
from .ui import DrawingGameObject, TextGameObject
from .world import GameOver, Textures, World

WINDOW_TITLE = "Mothership"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
CLEAR_COLOUR = (0, 0, 40)
ZOOM_OUT_SECONDS = 4.0

_COLOURS = {
    Textures.PLAYER: (80, 200, 255),
    Textures.INVINCIBLE: (255, 255, 120),
    Textures.MOTHERSHIP: (200, 60, 200),
    Textures.BARRIER: (120, 120, 255),
    Textures.BOOMER: (255, 120, 40),
    Textures.DREADNOUGHT: (160, 40, 40),
    Textures.FIGHTER: (255, 60, 60),
    Textures.EXPLOSION: (255, 200, 0),
    Textures.PROJECTILE_PLAYER: (200, 255, 255),
    Textures.PROJECTILE_ENEMY: (255, 150, 150),
    Textures.PULSE: (120, 255, 200),
    Textures.SHIELD_COLLECTIBLE: (100, 150, 255),
    Textures.HEALTH_COLLECTIBLE: (100, 255, 100),
    Textures.FUEL_COLLECTIBLE: (255, 160, 0),
    Textures.ORB: (230, 200, 150),
    Textures.BAR: (60, 60, 60),
    Textures.FONT: (255, 255, 255),
}
_GHOST_COLOUR = (110, 110, 110)
_HIDDEN = (Textures.EMPTY, Textures.STARS)

_CORNERS = np.array(
    [[-0.5, 0.5, 0.0, 1.0], [0.5, 0.5, 0.0, 1.0], [0.5, -0.5, 0.0, 1.0], [-0.5, -0.5, 0.0, 1.0]]
)


def camera_zoom(elapsed: float) -> float:
    """Zoom factor: zooms out during the first seconds, then holds steady."""
    return 0.6 - min(elapsed, ZOOM_OUT_SECONDS) / 8.0


def _translation(vector: Any) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = np.asarray(vector, dtype=float)[:3]
    return matrix


def _rotation(angle: float) -> np.ndarray:
    matrix = np.eye(4)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    matrix[0, 0], matrix[0, 1] = cos_a, -sin_a
    matrix[1, 0], matrix[1, 1] = sin_a, cos_a
    return matrix


def view_transform(
    width: int, height: int, elapsed: float, focus: Any = None
) -> np.ndarray:
    """View matrix for a window; centred on ``focus`` if given, else fixed."""
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    if width > height:
        window = np.diag([height / width, 1.0, 1.0, 1.0])
    else:
        window = np.diag([1.0, width / height, 1.0, 1.0])
    zoom = camera_zoom(elapsed)
    matrix = window @ np.diag([zoom, zoom, zoom, 1.0])
    if focus is not None:
        matrix = matrix @ _translation(-np.asarray(focus, dtype=float))
    return matrix


def _model(obj: GameObject) -> np.ndarray:
    scale = np.diag([float(obj.scale[0]), float(obj.scale[1]), 1.0, 1.0])
    return _translation(obj.position) @ _rotation(obj.rotation) @ scale


def _to_screen(matrix: np.ndarray, corners: np.ndarray, size: tuple[int, int]) -> list:
    width, height = size
    points = (matrix @ corners.T).T
    return [((x + 1.0) * width / 2.0, (1.0 - y) * height / 2.0) for x, y, *_ in points]


def _colour(obj: GameObject) -> tuple[int, int, int]:
    if getattr(obj, "ghost", False):
        return _GHOST_COLOUR
    return _COLOURS.get(obj.texture, (180, 180, 180))


def _draw_object(surface, obj, follow, fixed, font) -> None:
    if obj.texture in _HIDDEN and not isinstance(obj, ParticleSystem):
        return
    size = surface.get_size()
    if isinstance(obj, ParticleSystem):
        if obj.is_visible:
            points = _to_screen(follow @ obj.transformation, _CORNERS, size)
            pygame.draw.polygon(surface, _colour(obj), points, 1)
        return
    if isinstance(obj, DrawingGameObject):
        matrix = fixed @ _model(obj)
        pygame.draw.polygon(surface, _colour(obj), _to_screen(matrix, _CORNERS, size), 1)
        filled = _CORNERS.copy()
        filled[[1, 2], 0] = -0.5 + obj.fill_value
        colour = tuple(int(255 * c) for c in obj.fill_color[:3])
        pygame.draw.polygon(surface, colour, _to_screen(matrix, filled, size))
        return
    if isinstance(obj, TextGameObject):
        centre = _to_screen(fixed @ _model(obj), np.array([[0.0, 0.0, 0.0, 1.0]]), size)[0]
        rendered = font.render(obj.text, True, _colour(obj))
        surface.blit(rendered, rendered.get_rect(center=centre))
        return
    pygame.draw.polygon(surface, _colour(obj), _to_screen(follow @ _model(obj), _CORNERS, size))


def _draw(surface, world: World, elapsed: float, font) -> None:
    width, height = surface.get_size()
    follow = view_transform(width, height, elapsed, world.game_objects[0].position)
    fixed = view_transform(width, height, elapsed)
    surface.fill(CLEAR_COLOUR)
    for obj in [*world.celestial_objects, *world.game_objects]:
        _draw_object(surface, obj, follow, fixed, font)


def _pressed_keys() -> set[Key]:
    state = pygame.key.get_pressed()
    mapping = {
        pygame.K_w: Key.W,
        pygame.K_s: Key.S,
        pygame.K_q: Key.Q,
        pygame.K_e: Key.E,
        pygame.K_a: Key.A,
        pygame.K_d: Key.D,
        pygame.K_f: Key.F,
        pygame.K_LSHIFT: Key.LEFT_SHIFT,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    return {key for code, key in mapping.items() if state[code]}


def _run(args: argparse.Namespace) -> None:
    surface = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    font = pygame.font.Font(None, 24)

    world = World(rng=random.Random(args.seed))
    world.setup()

    start = time.monotonic()
    last = 0.0
    frame = 0
    while args.frames is None or frame < args.frames:
        elapsed = time.monotonic() - start
        delta_time = elapsed - last
        last = elapsed
        world.current_time = elapsed

        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            return
        if handle_controls(world, _pressed_keys(), delta_time):
            return
        try:
            world.update(delta_time)
        except GameOver as over:
            print(over.outcome.value)
            return
        _draw(surface, world, elapsed, font)
        pygame.display.flip()
        frame += 1


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until the game ends or is closed."""
    parser = argparse.ArgumentParser(prog="mothership", description="Fight the mothership.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    args = parser.parse_args(argv)

    pygame.display.init()
    pygame.font.init()
    try:
        _run(args)
    except (pygame.error, OSError, RuntimeError, ValueError) as exc:
        print(exc, file=sys.stderr)
    finally:
        pygame.quit()
    return 0