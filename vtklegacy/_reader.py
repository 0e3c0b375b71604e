"""
Reader for ASCII legacy VTK files holding an UNSTRUCTURED_GRID
<https://vtk.org/wp-content/uploads/2015/04/file-formats.pdf>.

The file is scanned line by line from top to bottom, no backtracking.
"""
from __future__ import annotations

import re

import numpy as np

from ._common import open_file, warn
from ._exceptions import (
    DuplicateArrayName,
    DuplicateDataParent,
    InconsistentCellCount,
    InconsistentDataCount,
    MalformedNumber,
    StructuralMismatch,
    UnsupportedDataset,
    UnsupportedFormat,
    UnsupportedLookup,
)
from ._mesh import Mesh

data_parents = ["POINT_DATA", "CELL_DATA"]
data_entries = ["SCALARS", "VECTORS"]

int_re = re.compile(r"[+-]?[0-9]+\Z", re.ASCII)
float_re = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)\Z",
    re.ASCII | re.IGNORECASE,
)


class _LineCursor:
    """Sequential view on a text stream, one line at a time.

    Keeps track of the 1-based number of the last consumed line and allows to look
    at the next line without consuming it.
    """

    def __init__(self, f):
        self._f = f
        self._pending = None
        self.lineno = 0

    def _fetch(self):
        if self._pending is None:
            line = self._f.readline()
            if not line:
                return None
            self._pending = line.rstrip("\r\n")
        return self._pending

    def peek(self) -> str | None:
        return self._fetch()

    def peek_is_blank(self) -> bool:
        line = self._fetch()
        return line is not None and line.strip() == ""

    def next_line(self, expected: str = "more data") -> str:
        line = self._fetch()
        if line is None:
            raise StructuralMismatch(expected, "end of file", self.lineno + 1)
        self._pending = None
        self.lineno += 1
        return line

    def skip_empty_lines(self) -> str | None:
        """Consumes blank lines and returns the next non-blank one (not consumed), or
        None at the end of the file.
        """
        while self.peek_is_blank():
            self.next_line()
        return self.peek()

    def expect_keyword(self, *keywords: str) -> list[str]:
        expected = " or ".join(keywords)
        self.skip_empty_lines()
        split = self.next_line(expected).split()
        if split[0] not in keywords:
            raise StructuralMismatch(expected, split[0], self.lineno)
        return split

    def next_numbers(self, count: int, dtype, expected: str) -> list:
        line = self.next_line(expected)
        split = line.split()
        if len(split) != count:
            raise StructuralMismatch(expected, line, self.lineno)
        return _to_numbers(split, dtype, self.lineno)


def _to_numbers(tokens, dtype, lineno):
    # int() and float() also take "1_0" and non-ASCII digits
    number_re = int_re if dtype is int else float_re
    out = []
    for token in tokens:
        if number_re.match(token) is None:
            raise MalformedNumber(token, lineno)
        out.append(dtype(token))
    return out


def _counts(tokens, expected, found, lineno):
    counts = _to_numbers(tokens, int, lineno)
    if any(count < 0 for count in counts):
        raise StructuralMismatch(expected, found, lineno)
    return counts


def _header_ints(split, count, expected, lineno):
    if len(split) < count + 1:
        raise StructuralMismatch(expected, " ".join(split), lineno)
    return _counts(split[1 : count + 1], expected, " ".join(split), lineno)


def read(filename):
    with open_file(filename, "r") as f:
        out = read_buffer(f)
    return out


def read_buffer(f):
    cursor = _LineCursor(f)

    # version and title, only their presence matters
    cursor.next_line("the VTK version line")
    cursor.next_line("the VTK header line")

    data_type = cursor.next_line("the file format")
    if data_type != "ASCII":
        raise UnsupportedFormat(data_type, cursor.lineno)

    split = cursor.next_line("DATASET").split()
    if not split or split[0] != "DATASET":
        raise StructuralMismatch("DATASET", " ".join(split), cursor.lineno)
    dataset_type = split[1] if len(split) > 1 else ""
    if dataset_type != "UNSTRUCTURED_GRID":
        raise UnsupportedDataset(dataset_type, cursor.lineno)

    field_data = {}
    split = cursor.expect_keyword("FIELD", "POINTS")
    while split[0] == "FIELD":
        _read_field(cursor, split, field_data)
        split = cursor.expect_keyword("FIELD", "POINTS")

    (num_points,) = _header_ints(split, 1, "POINTS <n> <dataType>", cursor.lineno)
    points = _read_points(cursor, num_points)

    split = cursor.expect_keyword("CELLS")
    num_cells, list_size = _header_ints(split, 2, "CELLS <n> <size>", cursor.lineno)
    cells = _read_cells(cursor, num_cells, num_points)
    actual_size = sum(len(cell) + 1 for cell in cells)
    if actual_size != list_size:
        warn(f"CELLS declares a list size of {list_size}, but {actual_size} were read.")

    split = cursor.expect_keyword("CELL_TYPES")
    (num_types,) = _header_ints(split, 1, "CELL_TYPES <n>", cursor.lineno)
    if num_types != num_cells:
        raise InconsistentCellCount(num_cells, num_types, cursor.lineno)
    cell_types = np.empty(num_types, dtype=int)
    for k in range(num_types):
        (cell_types[k],) = cursor.next_numbers(1, int, "1 cell type")

    data = {}
    while cursor.skip_empty_lines() is not None:
        split = cursor.expect_keyword(*data_parents)
        parent = split[0]
        (num_data,) = _header_ints(split, 1, f"{parent} <n>", cursor.lineno)

        expected = num_points if parent == "POINT_DATA" else num_cells
        if num_data != expected:
            raise InconsistentDataCount(parent, expected, num_data, cursor.lineno)

        if parent in data:
            raise DuplicateDataParent(parent, cursor.lineno)

        data[parent] = _read_data(cursor, parent, num_data)

    return Mesh(
        points,
        cells,
        cell_types,
        point_data=data.get("POINT_DATA"),
        cell_data=data.get("CELL_DATA"),
        field_data=field_data,
    )


def _read_field(cursor, split, field_data):
    if len(split) < 3:
        raise StructuralMismatch(
            "FIELD <name> <numArrays>", " ".join(split), cursor.lineno
        )
    field_name = split[1]
    (num_arrays,) = _counts(
        split[2:3], "FIELD <name> <numArrays>", " ".join(split), cursor.lineno
    )

    arrays = field_data.setdefault(field_name, {})
    for _ in range(num_arrays):
        expected = "<arrayName> <numComponents> <numTuples> <dataType>"
        line = cursor.next_line(expected)
        split = line.split()
        if len(split) != 4:
            raise StructuralMismatch(expected, line, cursor.lineno)
        name = split[0]
        num_components, num_tuples = _counts(split[1:3], expected, line, cursor.lineno)
        data_type = split[3]

        if name in arrays:
            raise DuplicateArrayName(f"FIELD {field_name}", name, cursor.lineno)

        if data_type != "double":
            warn(f"Reading {field_name}/{name} of data type '{data_type}' as float64.")

        values = np.empty((num_tuples, num_components), dtype=float)
        for k in range(num_tuples):
            values[k] = cursor.next_numbers(
                num_components, float, f"{num_components} components"
            )
        arrays[name] = values


def _read_points(cursor, num_points):
    points = np.empty((num_points, 3), dtype=float)
    for k in range(num_points):
        points[k] = cursor.next_numbers(3, float, "3 coordinates")
    return points


def _read_cells(cursor, num_cells, num_points):
    cells = []
    for _ in range(num_cells):
        # split() also takes care of runs of several spaces
        split = cursor.next_line("a cell").split()
        if not split:
            raise StructuralMismatch("a cell", "empty line", cursor.lineno)
        cell = np.array(_to_numbers(split, int, cursor.lineno)[1:], dtype=int)
        if np.any(cell < 0) or np.any(cell >= num_points):
            raise StructuralMismatch(
                f"point indices in [0, {num_points})",
                " ".join(split[1:]),
                cursor.lineno,
            )
        cells.append(cell)
    return cells


def _read_data(cursor, parent, num_data):
    d = {}
    while True:
        line = cursor.skip_empty_lines()
        if line is None or line.split()[0] not in data_entries:
            # leave the line for the caller
            break

        split = cursor.next_line().split()
        if len(split) < 3:
            raise StructuralMismatch(
                f"{split[0]} <name> <dataType>", " ".join(split), cursor.lineno
            )
        entry, name = split[:2]
        if entry == "SCALARS" and len(split) > 3 and split[3] != "1":
            raise StructuralMismatch("numComp 1", split[3], cursor.lineno)

        if name in d:
            raise DuplicateArrayName(parent, name, cursor.lineno)

        if entry == "SCALARS":
            split = cursor.next_line("LOOKUP_TABLE").split()
            if not split or split[0] != "LOOKUP_TABLE":
                found = split[0] if split else "empty line"
                raise UnsupportedLookup(found, cursor.lineno)

            values = np.empty(num_data, dtype=float)
            for k in range(num_data):
                (values[k],) = cursor.next_numbers(1, float, "1 value")
        else:
            values = np.empty((num_data, 3), dtype=float)
            for k in range(num_data):
                values[k] = cursor.next_numbers(3, float, "3 components")

        d[name] = values
    return d
