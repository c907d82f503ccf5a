"""Error types raised by the suite."""


class ConfigurationError(RuntimeError):
    """Required configuration (e.g. the base URL) is missing."""


class FieldValidityError(AssertionError):
    """A field's validity or required-ness did not match the expectation."""

    def __init__(self, field: str, expected: str, actual: str, page: str = ""):
        self.field = field
        self.expected = expected
        self.actual = actual
        self.page = page
        where = f" on {page}" if page else ""
        super().__init__(f'"{field}" expected {expected} but was {actual}{where}')
