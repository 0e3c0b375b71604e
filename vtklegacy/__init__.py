from .__about__ import __author__, __author_email__, __version__, __website__
from ._exceptions import (
    DuplicateArrayName,
    DuplicateDataParent,
    FieldSizeMismatch,
    InconsistentCellCount,
    InconsistentDataCount,
    LengthMismatch,
    MalformedNumber,
    PointCountMismatch,
    ReadError,
    RowSpecCountMismatch,
    StitchError,
    StructuralMismatch,
    TooFewLines,
    UnknownFieldType,
    UnsupportedDataset,
    UnsupportedFormat,
    UnsupportedLookup,
    WriteError,
)
from ._mesh import Mesh
from ._reader import read
from ._stitch import (
    pair_polylines_to_cells,
    pair_polylines_to_quads,
    polylines_to_vtk,
    stitch_polylines,
    stitch_rows,
)
from ._writer import generate_vtk, write, write_points_cells

__all__ = [
    "read",
    "write",
    "write_points_cells",
    "generate_vtk",
    "Mesh",
    "polylines_to_vtk",
    "pair_polylines_to_quads",
    "pair_polylines_to_cells",
    "stitch_rows",
    "stitch_polylines",
    "ReadError",
    "UnsupportedFormat",
    "UnsupportedDataset",
    "StructuralMismatch",
    "InconsistentCellCount",
    "InconsistentDataCount",
    "DuplicateDataParent",
    "DuplicateArrayName",
    "UnsupportedLookup",
    "MalformedNumber",
    "WriteError",
    "UnknownFieldType",
    "FieldSizeMismatch",
    "StitchError",
    "LengthMismatch",
    "TooFewLines",
    "RowSpecCountMismatch",
    "PointCountMismatch",
    "__version__",
    "__author__",
    "__author_email__",
    "__website__",
]
