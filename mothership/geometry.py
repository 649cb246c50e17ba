"""Vertex and index data for sprites and particle clouds."""

from __future__ import annotations

import math
import random

import numpy as np

# Four corners of a unit square: position (2), colour (3), texture uv (2).
_SQUARE = np.array(
    [
        [-0.5, 0.5, 1.0, 0.0, 0.0, 0.0, 0.0],
        [0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0],
        [0.5, -0.5, 0.0, 0.0, 1.0, 1.0, 1.0],
        [-0.5, -0.5, 1.0, 1.0, 1.0, 0.0, 1.0],
    ],
    dtype=np.float32,
)

# Two triangles covering the square.
_FACE = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)


class Geometry:
    """A piece of geometry: a vertex table and triangle indices."""

    def __init__(self) -> None:
        self.vertices = np.zeros((0, 7), dtype=np.float32)
        self.faces = np.zeros(0, dtype=np.uint32)

    @property
    def size(self) -> int:
        """Number of indices to draw."""
        return int(self.faces.size)


class Sprite(Geometry):
    """A textured square made of two triangles."""

    def __init__(self, texture_scale: float = 1.0) -> None:
        super().__init__()
        self.texture_scale = texture_scale

    def create_geometry(self) -> None:
        """Build the square, scaling texture coordinates for tiling."""
        vertices = _SQUARE.copy()
        vertices[:, 5:7] *= self.texture_scale
        self.vertices = vertices
        self.faces = _FACE.copy()


class Particles(Geometry):
    """A cloud of particle quads with random direction and phase.

    Each vertex row holds position (2), direction (2), phase (1) and uv (2).
    """

    def create_geometry(
        self,
        num_particles: int,
        angle_range: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        """Fill the vertex table with ``num_particles`` rows."""
        if num_particles < 0:
            raise ValueError("num_particles must not be negative")
        rng = rng if rng is not None else random.Random()

        groups = -(-num_particles // 4)
        params = []
        for _ in range(groups):
            if angle_range != 0.0:
                theta = rng.random() * angle_range
            else:
                theta = (2.0 * rng.random() - 1.0) * 0.3 + math.pi
            radius = 0.8 * rng.random()
            phase = rng.random()
            params.append((math.sin(theta) * radius, math.cos(theta) * radius, phase))

        per_vertex = np.repeat(np.array(params, dtype=np.float32).reshape(-1, 3), 4, axis=0)
        corners = np.tile(_SQUARE, (groups, 1))

        vertices = np.empty((num_particles, 7), dtype=np.float32)
        vertices[:, 0:2] = corners[:num_particles, 0:2]
        vertices[:, 2:5] = per_vertex[:num_particles]
        vertices[:, 5:7] = corners[:num_particles, 5:7]
        self.vertices = vertices

        offsets = np.arange(num_particles, dtype=np.uint32) * 4
        self.faces = (offsets[:, None] + _FACE[None, :]).reshape(-1)