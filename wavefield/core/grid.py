from typing import List, Tuple, Union
import numpy as np


class Grid:
    """
    Regular 2D grid with row-major cell indexing.

    Cell ``n`` lies at row ``n // width`` and column ``n % width``. The field is
    held at zero just outside the grid (fixed Dirichlet boundary): neighbor
    lookups that would leave the grid read ``0.0`` instead.

    Parameters
    ----------
    width : int
        Number of cells along x (columns).
    height : int
        Number of cells along y (rows).
    h : float
        Cell spacing, identical along both axes.

    Attributes
    ----------
    shape : tuple of int
        Array shape ``(height, width)`` of 2D fields.
    size : int
        Total number of cells ``width * height``.
    x : np.ndarray
        Physical x-coordinate of every column.
    y : np.ndarray
        Physical y-coordinate of every row.
    X, Y : np.ndarray
        Meshgrids of shape ``(height, width)``.
    grids : tuple
        ``(X, Y)``, the arguments passed to initial-condition callables.
    """

    def __init__(self, width: int, height: int, h: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if h <= 0:
            raise ValueError(f"Cell spacing must be positive, got {h}")

        self.width = int(width)
        self.height = int(height)
        self.h = float(h)
        self.shape = (self.height, self.width)
        self.size = self.width * self.height

        self.x = np.arange(self.width) * self.h
        self.y = np.arange(self.height) * self.h
        self.X, self.Y = np.meshgrid(self.x, self.y)
        self.grids = (self.X, self.Y)

    @classmethod
    def from_config(cls, config) -> "Grid":
        return cls(config.width, config.height, config.h)

    @property
    def center(self) -> Tuple[int, int]:
        """``(row, col)`` of the center cell, using integer division."""
        return self.height // 2, self.width // 2

    def row_col(self, n: int) -> Tuple[int, int]:
        return n // self.width, n % self.width

    def index(self, row: int, col: int) -> int:
        return row * self.width + col

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def neighbors(self, n: int, field: np.ndarray) -> Tuple[float, float, float, float]:
        """
        Return the four axis-aligned neighbor values of cell ``n``.

        Parameters
        ----------
        n : int
            Row-major cell index.
        field : np.ndarray
            Field values, either flat (``width * height``) or 2D.

        Returns
        -------
        tuple of float
            ``(left, right, top, bottom)``, with ``0.0`` for neighbors outside the grid.
        """
        u = np.ravel(field)
        if not 0 <= n < self.size:
            raise IndexError(f"Cell index {n} outside grid of {self.size} cells")

        left = 0.0 if n % self.width == 0 else float(u[n - 1])
        right = 0.0 if n % self.width == self.width - 1 else float(u[n + 1])
        top = 0.0 if n // self.width == 0 else float(u[n - self.width])
        bottom = 0.0 if n // self.width == self.height - 1 else float(u[n + self.width])

        return left, right, top, bottom

    def neighbor_fields(self, u: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Vectorized form of :meth:`neighbors` over the whole field.

        Pads ``u`` with a ring of zero ghost cells and slices the four shifted
        views out of it, so every cell reads only the given generation.

        Parameters
        ----------
        u : np.ndarray
            Field of shape ``(height, width)``.

        Returns
        -------
        tuple of np.ndarray
            ``(left, right, top, bottom)`` arrays, each of shape ``(height, width)``.
        """
        padded = np.pad(u, 1, mode='constant', constant_values=0.0)

        left = padded[1:-1, :-2]
        right = padded[1:-1, 2:]
        top = padded[:-2, 1:-1]
        bottom = padded[2:, 1:-1]

        return left, right, top, bottom

    def physical_to_index(self, pos: Union[float, List[float]]) -> Tuple[int, int]:
        """
        Convert physical coordinates ``[x, y]`` to a ``(row, col)`` cell, clamped to the grid.
        """
        pos = np.atleast_1d(np.array(pos, dtype=float))
        if pos.size != 2:
            raise ValueError(f"Expected a 2D position [x, y], got {pos.tolist()}")

        col = int(round(pos[0] / self.h))
        row = int(round(pos[1] / self.h))
        col = max(0, min(col, self.width - 1))
        row = max(0, min(row, self.height - 1))

        return row, col

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, h={self.h:g})"
