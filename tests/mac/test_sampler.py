"""Tests for bilinear velocity sampling on the staggered grid."""

import numpy as np
import pytest
from scipy.interpolate import RegularGridInterpolator

from fluid.mac import MACGrid, sample_velocity, sample_velocity_array


class TestExactness:
    """Sampling exactly at a face returns the stored value."""

    def test_u_faces(self, random_grid):
        g = random_grid
        for j in range(g.ny):
            for i in range(g.nx + 1):
                x, y = g.u_position(i, j)
                u, _ = sample_velocity(g, x, y)
                assert u == pytest.approx(g.u[g.u_idx(i, j)], abs=1e-12)

    def test_v_faces(self, random_grid):
        g = random_grid
        for j in range(g.ny + 1):
            for i in range(g.nx):
                x, y = g.v_position(i, j)
                _, v = sample_velocity(g, x, y)
                assert v == pytest.approx(g.v[g.v_idx(i, j)], abs=1e-12)


class TestBilinear:
    """Between faces the sampler is plain bilinear interpolation."""

    def test_u_matches_scipy(self, random_grid):
        g = random_grid
        x_faces = np.arange(g.nx + 1) * g.dx
        y_faces = (np.arange(g.ny) + 0.5) * g.dx
        reference = RegularGridInterpolator((y_faces, x_faces), g.u_2d, method="linear")

        rng = np.random.default_rng(7)
        x = rng.uniform(x_faces[0], x_faces[-1], 200)
        y = rng.uniform(y_faces[0], y_faces[-1], 200)
        u, _ = sample_velocity_array(g, x, y)

        assert np.allclose(u, reference(np.column_stack([y, x])), atol=1e-12)

    def test_v_matches_scipy(self, random_grid):
        g = random_grid
        x_faces = (np.arange(g.nx) + 0.5) * g.dx
        y_faces = np.arange(g.ny + 1) * g.dx
        reference = RegularGridInterpolator((y_faces, x_faces), g.v_2d, method="linear")

        rng = np.random.default_rng(11)
        x = rng.uniform(x_faces[0], x_faces[-1], 200)
        y = rng.uniform(y_faces[0], y_faces[-1], 200)
        _, v = sample_velocity_array(g, x, y)

        assert np.allclose(v, reference(np.column_stack([y, x])), atol=1e-12)

    def test_midpoint_is_average(self):
        grid = MACGrid(2, 2, 1.0)
        grid.u[grid.u_idx(1, 0)] = 2.0
        grid.u[grid.u_idx(1, 1)] = 4.0

        u, _ = sample_velocity(grid, 1.0, 1.0)

        assert u == pytest.approx(3.0)

    def test_constant_field_reproduced(self):
        """A uniform field samples to the same constant everywhere."""
        grid = MACGrid(5, 4, 3.0)
        grid.u = np.full(grid.u_size, 1.5)
        grid.v = np.full(grid.v_size, -2.0)

        x = np.linspace(-5.0, grid.width + 5.0, 23)
        y = np.linspace(-5.0, grid.height + 5.0, 23)
        u, v = sample_velocity_array(grid, *np.meshgrid(x, y))

        assert np.allclose(u, 1.5)
        assert np.allclose(v, -2.0)


class TestClamping:
    """Out-of-domain points sample at the nearest boundary point."""

    @pytest.mark.parametrize(
        "point,nearest",
        [
            ((-1000.0, -1000.0), (0.0, 0.0)),
            ((1e6, 1e6), (4.0, 3.0)),
            ((-3.0, 1.7), (0.0, 1.7)),
            ((2.2, 50.0), (2.2, 3.0)),
            ((9.0, -0.1), (4.0, 0.0)),
        ],
    )
    def test_far_outside(self, random_grid, point, nearest):
        # random_grid: 8x6 cells of 0.5 -> domain [0, 4] x [0, 3]
        assert sample_velocity(random_grid, *point) == pytest.approx(
            sample_velocity(random_grid, *nearest)
        )

    def test_edge_replication_below_first_u_row(self, random_grid):
        """Below the first u row the bottom row is replicated."""
        g = random_grid
        x, _ = g.u_position(3, 0)
        u, _ = sample_velocity(g, x, 0.1 * g.dx)

        assert u == pytest.approx(g.u[g.u_idx(3, 0)])

    def test_edge_replication_right_of_last_v_column(self, random_grid):
        g = random_grid
        _, y = g.v_position(g.nx - 1, 2)
        _, v = sample_velocity(g, g.width, y)

        assert v == pytest.approx(g.v[g.v_idx(g.nx - 1, 2)])

    def test_corners_use_wall_faces(self):
        """u on the right wall (column nx) is reachable by the sampler."""
        grid = MACGrid(3, 3, 1.0)
        grid.u[grid.u_idx(3, 1)] = 5.0

        u, _ = sample_velocity(grid, 3.0, 1.5)

        assert u == pytest.approx(5.0)


class TestVectorised:
    def test_array_matches_scalar(self, random_grid):
        g = random_grid
        rng = np.random.default_rng(3)
        x = rng.uniform(-1.0, g.width + 1.0, 50)
        y = rng.uniform(-1.0, g.height + 1.0, 50)

        u_arr, v_arr = sample_velocity_array(g, x, y)
        for k in range(50):
            u, v = sample_velocity(g, x[k], y[k])
            assert u == pytest.approx(u_arr[k])
            assert v == pytest.approx(v_arr[k])

    def test_shape_preserved(self, random_grid):
        x, y = np.meshgrid(np.linspace(0, 4, 7), np.linspace(0, 3, 5))
        u, v = sample_velocity_array(random_grid, x, y)

        assert u.shape == (5, 7)
        assert v.shape == (5, 7)

    def test_returns_python_floats(self, random_grid):
        u, v = sample_velocity(random_grid, 1.0, 1.0)
        assert isinstance(u, float) and isinstance(v, float)

    def test_sampling_does_not_mutate(self, random_grid):
        before = (random_grid.u.copy(), random_grid.v.copy(), random_grid.p.copy())
        sample_velocity_array(random_grid, np.linspace(-1, 5, 40), np.linspace(-1, 4, 40))

        assert np.array_equal(random_grid.u, before[0])
        assert np.array_equal(random_grid.v, before[1])
        assert np.array_equal(random_grid.p, before[2])
