"""Staggered (MAC) grid state and flat-array indexing.

Layout on an nx × ny grid with uniform spacing dx:
- Pressure p at cell centers, size nx * ny
- Horizontal velocity u on vertical faces, size (nx + 1) * ny
- Vertical velocity v on horizontal faces, size nx * (ny + 1)

All fields are stored row-major as flat float64 arrays. The index functions
below are the only place the flat geometry is encoded; they accept plain ints
or integer numpy arrays.
"""

import numbers

import numpy as np


def _check_positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


class MACGrid:
    """Pressure and velocity fields on a fixed staggered grid.

    Parameters
    ----------
    nx, ny : int
        Number of cells in x and y direction.
    dx : float
        Cell width (and height).
    """

    def __init__(self, nx: int, ny: int, dx: float):
        _check_positive_int("nx", nx)
        _check_positive_int("ny", ny)
        if not dx > 0:
            raise ValueError(f"dx must be positive, got {dx}")

        self._nx = int(nx)
        self._ny = int(ny)
        self._dx = float(dx)

        self.p = np.zeros(self.p_size)
        self.u = np.zeros(self.u_size)
        self.v = np.zeros(self.v_size)

    def __repr__(self):
        return f"MACGrid(nx={self.nx}, ny={self.ny}, dx={self.dx})"

    # ------------------------------------------------------------------
    # Dimensions (fixed for the lifetime of the grid)
    # ------------------------------------------------------------------

    @property
    def nx(self) -> int:
        return self._nx

    @property
    def ny(self) -> int:
        return self._ny

    @property
    def dx(self) -> float:
        return self._dx

    @property
    def width(self) -> float:
        return self._nx * self._dx

    @property
    def height(self) -> float:
        return self._ny * self._dx

    @property
    def p_size(self) -> int:
        return self._nx * self._ny

    @property
    def u_size(self) -> int:
        return (self._nx + 1) * self._ny

    @property
    def v_size(self) -> int:
        return self._nx * (self._ny + 1)

    # ------------------------------------------------------------------
    # Field buffers
    #
    # Assignment copies into a fresh float64 buffer of the expected size so
    # that no caller keeps an alias to the grid's storage.
    # ------------------------------------------------------------------

    @property
    def p(self) -> np.ndarray:
        return self._p

    @p.setter
    def p(self, values):
        self._p = self._own(values, self.p_size, "p")

    @property
    def u(self) -> np.ndarray:
        return self._u

    @u.setter
    def u(self, values):
        self._u = self._own(values, self.u_size, "u")

    @property
    def v(self) -> np.ndarray:
        return self._v

    @v.setter
    def v(self, values):
        self._v = self._own(values, self.v_size, "v")

    @staticmethod
    def _own(values, size, name):
        arr = np.array(values, dtype=np.float64, copy=True).ravel()
        if arr.shape != (size,):
            raise ValueError(f"{name} must have {size} values, got {arr.size}")
        return arr

    # ------------------------------------------------------------------
    # Index functions: (col, row) -> flat offset
    # ------------------------------------------------------------------

    def p_idx(self, i, j):
        """Cell-center index, i in [0, nx-1], j in [0, ny-1]."""
        return j * self._nx + i

    def u_idx(self, i, j):
        """Vertical-face index, i in [0, nx], j in [0, ny-1]."""
        return j * (self._nx + 1) + i

    def v_idx(self, i, j):
        """Horizontal-face index, i in [0, nx-1], j in [0, ny]."""
        return j * self._nx + i

    # Inverse mappings: flat offset -> (col, row)

    def p_coords(self, idx):
        j, i = np.divmod(idx, self._nx)
        return i, j

    def u_coords(self, idx):
        j, i = np.divmod(idx, self._nx + 1)
        return i, j

    def v_coords(self, idx):
        j, i = np.divmod(idx, self._nx)
        return i, j

    # ------------------------------------------------------------------
    # 2D views (row-major, shape (rows, cols)), mainly for plotting
    # ------------------------------------------------------------------

    @property
    def p_2d(self) -> np.ndarray:
        return self._p.reshape(self._ny, self._nx)

    @property
    def u_2d(self) -> np.ndarray:
        return self._u.reshape(self._ny, self._nx + 1)

    @property
    def v_2d(self) -> np.ndarray:
        return self._v.reshape(self._ny + 1, self._nx)

    # ------------------------------------------------------------------
    # Physical positions of grid locations
    # ------------------------------------------------------------------

    def u_position(self, i, j):
        """Domain position of u face (i, j)."""
        return i * self._dx, (j + 0.5) * self._dx

    def v_position(self, i, j):
        """Domain position of v face (i, j)."""
        return (i + 0.5) * self._dx, j * self._dx

    def cell_center(self, i, j):
        return (i + 0.5) * self._dx, (j + 0.5) * self._dx

    def copy(self) -> "MACGrid":
        """Independent deep copy of the grid."""
        other = MACGrid(self._nx, self._ny, self._dx)
        other.p = self._p
        other.u = self._u
        other.v = self._v
        return other
