"""Tests for MAC grid construction and flat-array indexing."""

import numpy as np
import pytest

from fluid.mac import MACGrid


class TestConstruction:
    """Tests for grid construction."""

    @pytest.mark.parametrize("nx,ny", [(1, 1), (6, 5), (40, 40), (3, 17)])
    def test_field_sizes(self, nx, ny):
        """Fields have the staggered sizes."""
        grid = MACGrid(nx, ny, 2.5)

        assert grid.p.shape == (nx * ny,)
        assert grid.u.shape == ((nx + 1) * ny,)
        assert grid.v.shape == (nx * (ny + 1),)

    def test_zero_initialised(self, small_grid):
        """All fields start at zero."""
        assert not np.any(small_grid.p)
        assert not np.any(small_grid.u)
        assert not np.any(small_grid.v)

    def test_domain_extent(self):
        grid = MACGrid(40, 30, 15.0)
        assert grid.width == pytest.approx(600.0)
        assert grid.height == pytest.approx(450.0)

    @pytest.mark.parametrize(
        "nx,ny,dx",
        [(0, 4, 1.0), (4, 0, 1.0), (-1, 4, 1.0), (4, 4, 0.0), (4, 4, -1.0), (2.5, 4, 1.0)],
    )
    def test_invalid_arguments_fail_fast(self, nx, ny, dx):
        """Non-positive or non-integer dimensions are rejected."""
        with pytest.raises(ValueError):
            MACGrid(nx, ny, dx)

    def test_dimensions_are_read_only(self, small_grid):
        with pytest.raises(AttributeError):
            small_grid.nx = 10


class TestFieldOwnership:
    """The grid owns private copies of its buffers."""

    def test_assignment_copies(self, small_grid):
        values = np.arange(small_grid.u_size, dtype=float)
        small_grid.u = values
        values[0] = 99.0

        assert small_grid.u[0] == 0.0

    def test_assignment_wrong_size_rejected(self, small_grid):
        with pytest.raises(ValueError):
            small_grid.p = np.zeros(small_grid.p_size + 1)

    def test_copy_is_independent(self, random_grid):
        clone = random_grid.copy()
        clone.u[0] += 1.0

        assert clone.u[0] != random_grid.u[0]
        assert np.array_equal(clone.v, random_grid.v)
        assert np.array_equal(clone.p, random_grid.p)


class TestIndexing:
    """Index functions are bijective onto [0, size)."""

    def _check_bijective(self, index, coords, n_cols, n_rows, size):
        i, j = np.meshgrid(np.arange(n_cols), np.arange(n_rows))
        offsets = index(i, j).ravel()

        assert offsets.min() == 0
        assert offsets.max() == size - 1
        assert len(np.unique(offsets)) == size

        i_back, j_back = coords(offsets)
        assert np.array_equal(i_back, i.ravel())
        assert np.array_equal(j_back, j.ravel())

    def test_pressure_index(self, small_grid):
        g = small_grid
        self._check_bijective(g.p_idx, g.p_coords, g.nx, g.ny, g.p_size)

    def test_u_index(self, small_grid):
        g = small_grid
        self._check_bijective(g.u_idx, g.u_coords, g.nx + 1, g.ny, g.u_size)

    def test_v_index(self, small_grid):
        g = small_grid
        self._check_bijective(g.v_idx, g.v_coords, g.nx, g.ny + 1, g.v_size)

    def test_row_major_layout(self, small_grid):
        """Row index is outermost."""
        g = small_grid
        assert g.p_idx(2, 3) == 3 * g.nx + 2
        assert g.u_idx(2, 3) == 3 * (g.nx + 1) + 2
        assert g.v_idx(2, 3) == 3 * g.nx + 2

    def test_scalar_round_trip(self, small_grid):
        g = small_grid
        for idx in range(g.u_size):
            i, j = g.u_coords(idx)
            assert g.u_idx(i, j) == idx

    def test_2d_views_share_storage(self, small_grid):
        g = small_grid
        g.u_2d[2, 4] = 7.0
        g.v_2d[g.ny, 0] = -3.0

        assert g.u[g.u_idx(4, 2)] == 7.0
        assert g.v[g.v_idx(0, g.ny)] == -3.0


class TestPositions:
    def test_face_positions(self):
        grid = MACGrid(4, 4, 2.0)

        assert grid.u_position(3, 1) == pytest.approx((6.0, 3.0))
        assert grid.v_position(3, 1) == pytest.approx((7.0, 2.0))
        assert grid.cell_center(3, 1) == pytest.approx((7.0, 3.0))
