"""
Generation of VTK connectivity from polylines. Two polylines with the same number of
points are stitched together into a band of quadrilateral cells by pairing their
points; several of them, with intermediate rows in between, give a structured
surface.
"""
from __future__ import annotations

import numpy as np

from ._exceptions import (
    LengthMismatch,
    PointCountMismatch,
    RowSpecCountMismatch,
    TooFewLines,
)


def polylines_to_vtk(lines, values=None):
    """Puts the points of all ``lines`` into one array.

    Returns ``(points, vtk_lines, vtk_values)`` where ``vtk_lines[i]`` holds the
    indices of the points of the i-th line, and ``vtk_values`` the per-point
    ``values`` (given line by line) in the order of ``points``.
    """
    points = []
    vtk_lines = []
    vtk_values = None if values is None else []

    num_points = 0
    for i, line in enumerate(lines):
        line = np.asarray(line, dtype=float)
        points.append(line)
        vtk_lines.append(np.arange(num_points, num_points + len(line)))
        if values is not None:
            vtk_values.append(np.asarray(values[i]))
        num_points += len(line)

    points = np.concatenate(points) if points else np.empty((0, 3))
    if values is not None:
        vtk_values = np.concatenate(vtk_values) if vtk_values else np.empty(0)
    return points, vtk_lines, vtk_values


def _check_pair(line1, line2):
    line1 = np.asarray(line1, dtype=float)
    line2 = np.asarray(line2, dtype=float)
    if line1.shape != line2.shape:
        raise LengthMismatch(
            "Cells can't be generated from lines of unequal divisions "
            f"({len(line1)} != {len(line2)})."
        )
    return line1, line2


def _check_data(point_data1, point_data2):
    if point_data1 is None or point_data2 is None:
        return None, None
    point_data1 = np.asarray(point_data1, dtype=float)
    point_data2 = np.asarray(point_data2, dtype=float)
    if point_data1.shape != point_data2.shape:
        raise LengthMismatch(
            f"Invalid point data! {point_data1.shape} != {point_data2.shape}"
        )
    return point_data1, point_data2


def _quad_cells(num_points):
    i = np.arange(num_points - 1)
    return np.column_stack([i, i + 1, num_points + i + 1, num_points + i])


def pair_polylines_to_quads(line1, line2, point_data1=None, point_data2=None):
    """Quadrilaterals ``[a[i], a[i+1], b[i+1], b[i]]`` spanned by two lines, given by
    their point coordinates.

    With point data for both lines, the matching 4-tuples of data are returned as
    well (None otherwise).
    """
    line1, line2 = _check_pair(line1, line2)
    point_data1, point_data2 = _check_data(point_data1, point_data2)

    quads = np.stack([line1[:-1], line1[1:], line2[1:], line2[:-1]], axis=1)
    if point_data1 is None:
        return quads, None
    data = np.stack(
        [point_data1[:-1], point_data1[1:], point_data2[1:], point_data2[:-1]], axis=1
    )
    return quads, data


def pair_polylines_to_cells(line1, line2, point_data1=None, point_data2=None):
    """Stitches two lines with the same number of points.

    Returns ``(points, cells, point_data)``: the points of ``line1`` followed by those
    of ``line2``, one quadrilateral cell per segment, e.g., ``[[0, 1, 4, 3], [1, 2,
    5, 4]]`` for two lines of three points, and the concatenated point data (None
    unless given for both lines).
    """
    line1, line2 = _check_pair(line1, line2)
    point_data1, point_data2 = _check_data(point_data1, point_data2)

    points = np.concatenate([line1, line2])
    cells = _quad_cells(len(line1))
    if point_data1 is None:
        return points, cells, None
    return points, cells, np.concatenate([point_data1, point_data2])


def stitch_rows(line1, line2, rows, point_data1=None, point_data2=None):
    """Like :func:`pair_polylines_to_cells`, but with several rows of cells between
    the lines.

    ``rows`` are the positions of the rows between ``line1`` (0) and ``line2`` (1),
    monotonically increasing; the first one stands for ``line1`` itself. Points and
    point data of the rows are linearly interpolated between both lines, and every
    row of points is stored once.
    """
    line1, line2 = _check_pair(line1, line2)
    point_data1, point_data2 = _check_data(point_data1, point_data2)

    rows = np.asarray(rows, dtype=float)
    if len(rows) < 2:
        raise ValueError(f"Need at least two row positions, got {len(rows)}.")
    if np.any(np.diff(rows) < 0.0) or np.any(rows < 0.0) or np.any(rows > 1.0):
        raise ValueError("Row positions must increase monotonically in [0, 1].")

    num_points = len(line1)
    row_cells = _quad_cells(num_points)

    points = [line1]
    point_data = None if point_data1 is None else [point_data1]
    cells = []
    for i, pos in enumerate(rows[1:]):
        points.append(line1 + pos * (line2 - line1))
        if point_data is not None:
            point_data.append(point_data1 + pos * (point_data2 - point_data1))
        cells.append(row_cells + i * num_points)

    if point_data is not None:
        point_data = np.concatenate(point_data)
    return np.concatenate(points), np.concatenate(cells), point_data


def stitch_polylines(lines, rows, point_datas=None):
    """Stitches any number of lines, each one to the next, with the rows between
    ``lines[i]`` and ``lines[i + 1]`` given by ``rows[i]`` (see
    :func:`stitch_rows`).
    """
    num_lines = len(lines)
    if num_lines < 2:
        raise TooFewLines(f"Two or more lines are required. Received {num_lines}.")
    if point_datas is not None and len(point_datas) != num_lines:
        raise LengthMismatch(
            f"Invalid point data. {len(point_datas)} != {num_lines} lines."
        )
    if len(rows) != num_lines - 1:
        raise RowSpecCountMismatch(
            f"Invalid number of row sequences. Expected {num_lines - 1}, "
            f"received {len(rows)}."
        )
    num_points = len(lines[0])
    for line in lines:
        if len(line) != num_points:
            raise PointCountMismatch(
                "All lines must have the same number of points. "
                f"Expected {num_points}, found {len(line)}."
            )

    points = []
    cells = []
    point_data = None if point_datas is None else []
    offset = 0
    for i in range(1, num_lines):
        section_points, section_cells, section_data = stitch_rows(
            lines[i - 1],
            lines[i],
            rows[i - 1],
            point_data1=None if point_datas is None else point_datas[i - 1],
            point_data2=None if point_datas is None else point_datas[i],
        )
        # the first line of every section but the first one is already there
        start = 0 if i == 1 else num_points
        points.append(section_points[start:])
        if point_data is not None:
            point_data.append(section_data[start:])
        cells.append(section_cells + offset)
        offset += len(section_points) - num_points

    if point_data is not None:
        point_data = np.concatenate(point_data)
    return np.concatenate(points), np.concatenate(cells), point_data
