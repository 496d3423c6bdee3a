"""Exception hierarchy for the balance sheet pipeline.

Core functions raise these; only the CLI boundary catches them and decides
on the exit status.
"""


class BalanceSheetError(Exception):
    """Base class for every failure the pipeline reports."""


class InvalidInput(BalanceSheetError):
    """Input is well-formed but cannot be turned into a balance sheet."""


class EmptySeriesError(InvalidInput):
    """An expense or revenue series has no entries to anchor on."""


class OffGridEntryError(InvalidInput):
    """An entry does not fall on any of the 12 generated month slots."""


class AnchorMismatchError(InvalidInput):
    """Expense and revenue series were anchored on different start-of-year dates."""


class MalformedSource(BalanceSheetError):
    """Input text could not be decoded into the expected structure."""


class IOFailure(BalanceSheetError):
    """Reading the input file or writing the output file failed."""
