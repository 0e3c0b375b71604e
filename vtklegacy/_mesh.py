from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ._common import VTK_POLYGON, field_kinds
from ._exceptions import UnknownFieldType


def field_kind(name: str, values) -> tuple[str, np.ndarray]:
    """Returns the kind (``"scalar"`` or ``"vector"``) of a data field together with
    its values as a numpy array.

    A field is either given as a bare array, in which case the kind is deduced from
    the shape (1-D is scalar, ``(n, 3)`` is vector), or as a ``(kind, values)``
    tuple.
    """
    if isinstance(values, tuple):
        kind, values = values
        if kind not in field_kinds:
            raise UnknownFieldType(name, kind)
        values = np.asarray(values)
        if kind == "scalar" and values.ndim == 2 and values.shape[1] == 1:
            values = values[:, 0]
        if (kind == "scalar" and values.ndim != 1) or (
            kind == "vector" and (values.ndim != 2 or values.shape[1] not in [2, 3])
        ):
            raise UnknownFieldType(name, f"{kind} of shape {values.shape}")
        return kind, values

    values = np.asarray(values)
    if values.ndim == 1:
        return "scalar", values
    if values.ndim == 2 and values.shape[1] in [2, 3]:
        return "vector", values
    raise UnknownFieldType(name, f"array of shape {values.shape}")


class Mesh:
    def __init__(
        self,
        points: ArrayLike,
        cells: list[ArrayLike],
        cell_types: ArrayLike | None = None,
        point_data: dict[str, ArrayLike] | None = None,
        cell_data: dict[str, ArrayLike] | None = None,
        field_data: dict[str, dict[str, ArrayLike]] | None = None,
    ):
        self.points = np.asarray(points, dtype=float)
        if self.points.size == 0:
            self.points = self.points.reshape(0, 3)

        self.cells = [np.asarray(cell, dtype=int) for cell in cells]

        if cell_types is None:
            self.cell_types = np.full(len(self.cells), VTK_POLYGON, dtype=int)
        else:
            self.cell_types = np.asarray(cell_types, dtype=int)

        self.point_data = {} if point_data is None else point_data
        self.cell_data = {} if cell_data is None else cell_data
        self.field_data = {} if field_data is None else field_data

        if len(self.cell_types) != len(self.cells):
            raise ValueError(
                f"len(cells) = {len(self.cells)}, "
                f"but len(cell_types) = {len(self.cell_types)}"
            )

        num_points = len(self.points)
        for k, cell in enumerate(self.cells):
            if np.any(cell < 0) or np.any(cell >= num_points):
                raise ValueError(
                    f"Cell {k} refers to nonexistent points "
                    f"(there are {num_points} points)."
                )

        # assert data consistency and convert to numpy arrays
        for key, item in self.point_data.items():
            _, self.point_data[key] = field_kind(key, item)
            if len(self.point_data[key]) != num_points:
                raise ValueError(
                    f"len(points) = {num_points}, "
                    f'but len(point_data["{key}"]) = {len(self.point_data[key])}'
                )

        for key, item in self.cell_data.items():
            _, self.cell_data[key] = field_kind(key, item)
            if len(self.cell_data[key]) != len(self.cells):
                raise ValueError(
                    f"len(cells) = {len(self.cells)}, "
                    f'but len(cell_data["{key}"]) = {len(self.cell_data[key])}'
                )

        for arrays in self.field_data.values():
            for array_name, values in arrays.items():
                values = np.asarray(values, dtype=float)
                if values.ndim < 2:
                    values = values.reshape(-1, 1)
                arrays[array_name] = values

    def __repr__(self):
        lines = [
            "<vtklegacy mesh object>",
            f"  Number of points: {len(self.points)}",
            f"  Number of cells: {len(self.cells)}",
        ]
        if len(self.cell_types) > 0:
            types, counts = np.unique(self.cell_types, return_counts=True)
            for tpe, count in zip(types, counts):
                lines.append(f"    VTK type {tpe}: {count}")

        if self.point_data:
            names = ", ".join(self.point_data.keys())
            lines.append(f"  Point data: {names}")

        if self.cell_data:
            names = ", ".join(self.cell_data.keys())
            lines.append(f"  Cell data: {names}")

        for field_name, arrays in self.field_data.items():
            names = ", ".join(arrays.keys())
            lines.append(f"  Field data {field_name}: {names}")

        return "\n".join(lines)

    @property
    def data(self) -> dict[str, dict[str, np.ndarray]]:
        """Point and cell data keyed by their VTK section name."""
        out = {}
        if self.point_data:
            out["POINT_DATA"] = self.point_data
        if self.cell_data:
            out["CELL_DATA"] = self.cell_data
        return out
