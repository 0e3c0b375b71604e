class ReadError(Exception):
    def __init__(self, msg="", lineno=None):
        self.lineno = lineno
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)


class UnsupportedFormat(ReadError):
    def __init__(self, found, lineno=None):
        self.found = found
        super().__init__(f"Only ASCII files are supported, found '{found}'.", lineno)


class UnsupportedDataset(ReadError):
    def __init__(self, found, lineno=None):
        self.found = found
        super().__init__(
            f"Only UNSTRUCTURED_GRID datasets are supported, found '{found}'.", lineno
        )


class StructuralMismatch(ReadError):
    def __init__(self, expected, found, lineno=None):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected}, found '{found}'.", lineno)


class InconsistentCellCount(ReadError):
    def __init__(self, num_cells, num_cell_types, lineno=None):
        self.num_cells = num_cells
        self.num_cell_types = num_cell_types
        super().__init__(
            f"Found {num_cell_types} cell types, but there are {num_cells} cells.",
            lineno,
        )


class InconsistentDataCount(ReadError):
    def __init__(self, parent, expected, found, lineno=None):
        self.parent = parent
        self.expected = expected
        self.found = found
        super().__init__(
            f"{parent} declares {found} entries, but {expected} are required.", lineno
        )


class DuplicateDataParent(ReadError):
    def __init__(self, parent, lineno=None):
        self.parent = parent
        super().__init__(f"Found {parent} more than once.", lineno)


class DuplicateArrayName(ReadError):
    def __init__(self, parent, name, lineno=None):
        self.parent = parent
        self.name = name
        super().__init__(f"Found '{name}' more than once in {parent}.", lineno)


class UnsupportedLookup(ReadError):
    def __init__(self, found, lineno=None):
        self.found = found
        super().__init__(f"Only LOOKUP_TABLE is supported, found '{found}'.", lineno)


class MalformedNumber(ReadError):
    def __init__(self, token, lineno=None):
        self.token = token
        super().__init__(f"Cannot convert '{token}' to a number.", lineno)


class WriteError(Exception):
    pass


class UnknownFieldType(WriteError):
    def __init__(self, name, kind):
        self.name = name
        self.kind = kind
        super().__init__(
            f"Unknown field type '{kind}' of field '{name}'. "
            "Valid types are 'scalar' and 'vector'."
        )


class FieldSizeMismatch(UserWarning):
    pass


class StitchError(ValueError):
    pass


class LengthMismatch(StitchError):
    pass


class TooFewLines(StitchError):
    pass


class RowSpecCountMismatch(StitchError):
    pass


class PointCountMismatch(StitchError):
    pass
