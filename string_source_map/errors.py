# string_source_map/errors.py


class StringSourceMapError(Exception):
    """Base error. `path` is the file that triggered it."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class IdentifierTableNotFound(StringSourceMapError):
    pass


class IdentifierTableParseError(StringSourceMapError):
    pass


class ResourceFileParseError(StringSourceMapError):
    """A single strings.xml could not be scraped. Never fatal for the step."""


class OutputWriteError(StringSourceMapError):
    pass
