"""Exception hierarchy shared by the scanning, selection and copy layers."""


class RandomCopyError(Exception):
    """Base exception for randcopy errors."""


class InvalidArgumentError(RandomCopyError, ValueError):
    """Raised when an argument breaks an internal invariant.

    Covers absent filters, negative budgets or sizes, negative decimal
    counts and colliding names without an extension separator.
    """


class SourceNotDirectoryError(RandomCopyError, NotADirectoryError):
    """Raised when a scan root does not exist or is not a directory."""


class FileTransferError(RandomCopyError):
    """Raised when the filesystem fails while scanning or copying.

    The underlying OSError is always chained as ``__cause__``.
    """


class ArgumentValidationError(RandomCopyError):
    """Raised when command line arguments fail validation.

    The message is the user-facing detail printed after ``ERROR:``.
    """
