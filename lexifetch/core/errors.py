"""Exception types raised by lexifetch."""


class LexifetchError(Exception):
    """Base class for all lexifetch errors."""


class DefinitionLookupError(LexifetchError):
    """A definition lookup failed in transport or while parsing the response.

    Distinct from a term simply being absent from the dictionary, which is
    reported as ``None`` by the lookup source.
    """

    def __init__(self, term: str, detail: str):
        super().__init__(f"{term}: {detail}")
        self.term = term
        self.detail = detail


class SetupError(LexifetchError):
    """Input could not be obtained or validated before scheduling began."""
