from contextlib import contextmanager

from rich.console import Console

# https://vtk.org/doc/nightly/html/vtkCellType_8h_source.html
VTK_VERTEX = 1
VTK_LINE = 3
VTK_POLY_LINE = 4
VTK_POLYGON = 7
VTK_QUAD = 9
VTK_HEXAHEDRON = 12

# fixed cell type of the cells block when writing a structured grid
griddims_to_vtk_type = {
    1: VTK_LINE,
    2: VTK_QUAD,
    3: VTK_HEXAHEDRON,
}

field_kinds = ["scalar", "vector"]


def warn(string, highlight: bool = True) -> None:
    Console(stderr=True).print(
        f"[yellow][bold]Warning:[/bold] {string}[/yellow]", highlight=highlight
    )


@contextmanager
def open_file(filename, mode: str = "r"):
    """Opens the VTK file ``filename`` in text mode, or passes it through untouched
    when it already is an open text stream (``read`` for reading, ``write`` for
    writing).
    """
    method = "read" if mode == "r" else "write"
    if hasattr(filename, method):
        yield filename
        return
    with open(filename, mode) as f:
        yield f
