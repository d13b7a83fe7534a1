"""ctcompare exceptions."""


class CTCompareError(Exception):
    """Base exception for ctcompare."""


class ConfigError(CTCompareError):
    """Raised when an organ configuration is malformed or unknown."""


class SourceFetchError(CTCompareError):
    """Raised when a remote document cannot be fetched."""


class ReferenceFetchError(SourceFetchError):
    """Raised when an organ's ASCT+B table cannot be fetched."""


class TableDecodeError(CTCompareError):
    """Raised when delimited text cannot be decoded."""
