"""
Writer for ASCII legacy VTK files holding an UNSTRUCTURED_GRID
<https://vtk.org/wp-content/uploads/2015/04/file-formats.pdf>.
"""
from __future__ import annotations

import io
import pathlib
import warnings

import numpy as np

from ._common import (
    VTK_POLY_LINE,
    VTK_POLYGON,
    VTK_VERTEX,
    griddims_to_vtk_type,
    open_file,
    warn,
)
from ._exceptions import FieldSizeMismatch, WriteError
from ._mesh import field_kind

header = "# vtk DataFile Version 4.0"


def _fmt(value, digits):
    return repr(round(float(value), digits))


def _pad(array):
    return np.pad(array, ((0, 0), (0, 1)), "constant")


def write(filename, mesh, time=None, comment: str = "", digits: int = 32):
    """Writes a mesh with its own cell types and all of its data."""
    text = _render(
        mesh.points,
        mesh.cells,
        mesh.cell_types,
        point_data=mesh.point_data or None,
        cell_data=mesh.cell_data or None,
        num_data_cells=len(mesh.cells),
        field_data=mesh.field_data,
        time=time,
        comment=comment,
        digits=digits,
    )
    with open_file(filename, "w") as f:
        f.write(text)


def write_points_cells(
    filename,
    points,
    lines=None,
    cells=None,
    point_data=None,
    cell_data=None,
    time=None,
    comment: str = "",
    griddims: int | None = None,
    keep_points: bool = False,
    cell_type: int | None = None,
    digits: int = 32,
):
    """Writes points together with polylines and cells.

    Polylines get the VTK type 4. Cells get ``cell_type`` if given, else the fixed
    type of a grid of dimension ``griddims`` (line, quad or hexahedron), else the
    polygon type 7. Unless ``griddims`` is set, the points are also written as
    vertex cells when ``keep_points`` is set or there are neither lines nor cells.

    ``point_data`` and ``cell_data`` map names to arrays (one entry per point or
    cell), optionally tagged as ``("scalar", values)`` or ``("vector", values)``.
    """
    lines = [] if lines is None else list(lines)
    cells = [] if cells is None else list(cells)
    num_points = len(points)

    keep_points = keep_points or (len(lines) == 0 and len(cells) == 0)
    # a grid never carries its points as vertex cells
    num_vertices = num_points if griddims is None and keep_points else 0

    entries = [[k] for k in range(num_vertices)] + lines + cells
    types = [VTK_VERTEX] * num_vertices + [VTK_POLY_LINE] * len(lines)
    if cells:
        types += [_cells_type(griddims, cell_type)] * len(cells)

    text = _render(
        points,
        entries,
        types,
        point_data=point_data,
        cell_data=cell_data,
        num_data_cells=len(cells),
        time=time,
        comment=comment,
        digits=digits,
    )
    with open_file(filename, "w") as f:
        f.write(text)


def generate_vtk(
    filename: str,
    points,
    lines=None,
    cells=None,
    point_data=None,
    cell_data=None,
    path="",
    num: int | None = None,
    **kwargs,
) -> str:
    """Writes ``<filename>[.<num>].vtk`` into the directory ``path`` (created if
    needed) and returns the file name followed by a semicolon. See
    :func:`write_points_cells` for the remaining arguments.
    """
    ext = ".vtk" if num is None else f".{num}.vtk"
    path = pathlib.Path(path)
    path.mkdir(parents=True, exist_ok=True)
    write_points_cells(
        path / (filename + ext),
        points,
        lines=lines,
        cells=cells,
        point_data=point_data,
        cell_data=cell_data,
        **kwargs,
    )
    return filename + ext + ";"


def _cells_type(griddims, cell_type):
    if cell_type is not None:
        return cell_type
    if griddims is None:
        return VTK_POLYGON
    try:
        return griddims_to_vtk_type[griddims]
    except KeyError:
        raise WriteError(
            f"Generation of VTK cells of {griddims} dimensions not implemented."
        )


def _prepare_data(data):
    out = {}
    for name, values in data.items():
        if len(name.split()) != 1 or name != name.strip():
            raise WriteError(f"VTK doesn't support spaces in field names ('{name}').")
        kind, values = field_kind(name, values)
        if kind == "vector" and values.shape[1] == 2:
            warn(
                "VTK requires 3D vectors, but 2D vectors given. "
                f"Appending 0 third component to {name}."
            )
            values = _pad(values)
        out[name] = (kind, values)
    return out


def _render(
    points,
    entries,
    types,
    point_data=None,
    cell_data=None,
    num_data_cells=0,
    field_data=None,
    time=None,
    comment="",
    digits=32,
):
    if "\n" in comment:
        raise WriteError("The comment must fit on a single line.")

    points = np.asarray(points, dtype=float)
    if points.size == 0:
        points = points.reshape(0, 3)
    elif points.shape[1] == 2:
        warn(
            "VTK requires 3D points, but 2D points given. "
            "Appending 0 third component."
        )
        points = _pad(points)

    # validate all data before anything gets written
    if point_data is not None:
        point_data = _prepare_data(point_data)
    if cell_data is not None:
        cell_data = _prepare_data(cell_data)

    fields = {}
    if time is not None:
        fields["FieldData"] = {"TimeValue": np.array([[time]], dtype=float)}
    for field_name, arrays in ({} if field_data is None else field_data).items():
        fields.setdefault(field_name, {})
        for name, values in arrays.items():
            fields[field_name].setdefault(name, values)

    f = io.StringIO()
    f.write(f"{header}\n")
    f.write(f" {comment}\n")
    f.write("ASCII\n")
    f.write("DATASET UNSTRUCTURED_GRID\n")

    _write_field_data(f, fields, digits)
    _write_points(f, points, digits)
    _write_cells(f, entries, types)

    # point data and cell data are counted apart from the vertex cells
    if point_data is not None:
        _write_data(f, "POINT_DATA", len(points), point_data, digits)
    if cell_data is not None:
        _write_data(f, "CELL_DATA", num_data_cells, cell_data, digits)

    return f.getvalue()


def _write_field_data(f, fields, digits):
    for field_name, arrays in fields.items():
        f.write(f"FIELD {field_name} {len(arrays)}\n")
        for name, values in arrays.items():
            values = np.asarray(values, dtype=float)
            if values.ndim < 2:
                values = values.reshape(-1, 1)
            num_tuples, num_components = values.shape
            f.write(f"{name} {num_components} {num_tuples} double\n")
            for row in values:
                f.write(" ".join(_fmt(x, digits) for x in row) + "\n")


def _write_points(f, points, digits):
    f.write(f"POINTS {len(points)} float\n")
    for point in points:
        f.write(" ".join(_fmt(x, digits) for x in point) + "\n")


def _write_cells(f, entries, types):
    # For each cell, the number of nodes is stored
    list_size = sum(len(entry) + 1 for entry in entries)
    f.write(f"\nCELLS {len(entries)} {list_size}\n")
    for entry in entries:
        f.write(" ".join([str(len(entry))] + [str(int(k)) for k in entry]) + "\n")

    f.write(f"\nCELL_TYPES {len(types)}\n")
    for tpe in types:
        f.write(f"{int(tpe)}\n")


def _write_data(f, parent, num_items, data, digits):
    f.write(f"\n{parent} {num_items}\n")
    items = "points" if parent == "POINT_DATA" else "cells"
    for name, (kind, values) in data.items():
        if len(values) != num_items:
            warnings.warn(
                f"Corrupted field '{name}': {len(values)} entries, "
                f"but there are {num_items} {items}.",
                FieldSizeMismatch,
            )
        if kind == "scalar":
            f.write(f"\nSCALARS {name} float\nLOOKUP_TABLE default\n")
            for value in values:
                f.write(_fmt(value, digits) + "\n")
        else:
            f.write(f"\nVECTORS {name} float\n")
            for value in values:
                f.write(" ".join(_fmt(x, digits) for x in value) + "\n")
