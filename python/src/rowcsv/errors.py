"""Exception types for rowcsv."""


class RowCsvError(RuntimeError):
    """Base exception for rowcsv errors."""


class ConversionError(RowCsvError, ValueError):
    """Exception raised when a field cannot be converted to the requested type.

    Attributes
    ----------
    text : str
        The raw field text.
    field_type : FieldType
        The type the conversion targeted.
    """

    def __init__(self, text, field_type):
        super().__init__(f"cannot convert {text!r} to {field_type.name}")
        self.text = text
        self.field_type = field_type


class SelectionError(RowCsvError, LookupError):
    """Exception raised when a column selection names unknown columns."""


class SourceError(RowCsvError):
    """Exception raised when a source cannot be opened or has no header."""
