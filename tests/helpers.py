import copy
import string

import numpy as np

import vtklegacy

# In general:
# Use values with an infinite decimal representation to test precision.

empty_mesh = vtklegacy.Mesh(np.empty((0, 3)), [])

line_mesh = vtklegacy.Mesh(
    [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]],
    [[0, 1], [1, 2], [2, 3]],
    [3, 3, 3],
)

tri_mesh = vtklegacy.Mesh(
    [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]],
    [[0, 1, 2], [0, 2, 3]],
    [5, 5],
)

quad_mesh = vtklegacy.Mesh(
    [
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [2.0, 0.0, 0.0],
        [2.0, 1.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
    ],
    [[0, 1, 4, 5], [1, 2, 3, 4]],
    [9, 9],
)

polygon_mesh = vtklegacy.Mesh(
    [
        [0.0, 0.0, 0.0],
        [1.1, 0.0, 0.0],
        [1.2, 0.5, 0.0],
        [1.1, 1.0, 0.0],
        [0.0, 1.0, 0.0],
        [-0.1, 0.5, 0.0],
        [2.0, 1.0 / 3.0, 0.0],
    ],
    [[0, 1, 2, 3, 4, 5], [1, 6, 2]],
)

hex_mesh = vtklegacy.Mesh(
    [
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [1.0, 0.0, 1.0],
        [1.0, 1.0, 1.0],
        [0.0, 1.0, 1.0],
    ],
    [[0, 1, 2, 3, 4, 5, 6, 7]],
    [12],
)

# vertices, a polyline and a polygon in one grid
mixed_mesh = vtklegacy.Mesh(
    [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0 / 3.0, 0.0]],
    [[0], [1], [0, 1, 2, 3], [0, 1, 2]],
    [1, 1, 4, 7],
)


def add_point_data(mesh, dim, num_tags=2, seed=0):
    rng = np.random.default_rng(seed)

    mesh2 = copy.deepcopy(mesh)

    shape = (len(mesh.points),) if dim == 1 else (len(mesh.points), dim)
    data = [100 * rng.random(shape) for _ in range(num_tags)]

    mesh2.point_data = {string.ascii_lowercase[k]: d for k, d in enumerate(data)}
    return mesh2


def add_cell_data(mesh, dim, num_tags=2, seed=0):
    rng = np.random.default_rng(seed)

    mesh2 = copy.deepcopy(mesh)

    shape = (len(mesh.cells),) if dim == 1 else (len(mesh.cells), dim)
    data = [100 * rng.random(shape) for _ in range(num_tags)]

    mesh2.cell_data = {string.ascii_uppercase[k]: d for k, d in enumerate(data)}
    return mesh2


def add_field_data(mesh):
    mesh2 = copy.deepcopy(mesh)
    mesh2.field_data = {
        "FieldData": {"TimeValue": np.array([[1.0 / 3.0]])},
        "Extra": {
            "origin": np.array([[0.0, 1.0 / 7.0, 2.0]]),
            "steps": np.array([[1.0], [2.0], [3.0]]),
        },
    }
    return mesh2


def write_read(tmp_path, writer, reader, input_mesh, atol, extension=".vtk"):
    """Write and read a file, and make sure the data is the same as before."""
    in_mesh = copy.deepcopy(input_mesh)

    p = tmp_path / ("test" + extension)
    writer(p, input_mesh)
    mesh = reader(p)

    # assert that the input mesh hasn't changed at all
    assert np.allclose(in_mesh.points, input_mesh.points, atol=atol, rtol=0.0)
    assert len(in_mesh.cells) == len(input_mesh.cells)
    for c0, c1 in zip(in_mesh.cells, input_mesh.cells):
        assert np.array_equal(c0, c1)

    assert mesh.points.shape == in_mesh.points.shape
    assert np.allclose(in_mesh.points, mesh.points, atol=atol, rtol=0.0)

    assert len(mesh.cells) == len(in_mesh.cells)
    for c0, c1 in zip(in_mesh.cells, mesh.cells):
        assert np.array_equal(c0, c1)
    assert np.array_equal(in_mesh.cell_types, mesh.cell_types)

    assert list(mesh.point_data.keys()) == list(in_mesh.point_data.keys())
    for key, values in in_mesh.point_data.items():
        assert np.allclose(values, mesh.point_data[key], atol=atol, rtol=0.0)

    assert list(mesh.cell_data.keys()) == list(in_mesh.cell_data.keys())
    for key, values in in_mesh.cell_data.items():
        assert np.allclose(values, mesh.cell_data[key], atol=atol, rtol=0.0)

    for field_name, arrays in in_mesh.field_data.items():
        assert list(mesh.field_data[field_name].keys()) == list(arrays.keys())
        for name, values in arrays.items():
            assert np.allclose(
                values, mesh.field_data[field_name][name], atol=atol, rtol=0.0
            )
