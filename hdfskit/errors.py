"""Exception hierarchy for HDFS client operations.

Every error derives from :class:`HdfsError`. Errors that have a natural
built-in counterpart also derive from it, so callers can catch, for example,
``FileNotFoundError`` without knowing about this package. Everything else
derives from ``RuntimeError``.
"""


class HdfsError(Exception):
    """Base class for all HDFS errors."""

    description = "HDFS error"

    def __init__(self, detail=None):
        self.detail = detail
        super().__init__(self.description if detail is None else detail)


class HdfsIOError(HdfsError, OSError):
    """An I/O failure while talking to HDFS."""

    description = "IO error occurred while communicating with HDFS"


class DataTransferError(HdfsError, RuntimeError):
    """A failure in the data transfer protocol."""

    description = "data transfer error"


class ChecksumError(HdfsError, RuntimeError):
    """Checksums of received data did not match."""

    description = "checksums didn't match"


class InvalidPathError(HdfsError, RuntimeError):
    """A path could not be used."""

    description = "invalid path"


class InvalidArgumentError(HdfsError, RuntimeError):
    """An argument or setting was invalid."""

    description = "invalid argument"


class UrlParseError(HdfsError, RuntimeError):
    """A URL could not be parsed."""

    description = "failed to parse URL"


class AlreadyExistsError(HdfsError, FileExistsError):
    """The file already exists."""

    description = "file already exists"


class OperationFailedError(HdfsError, RuntimeError):
    """An operation did not complete."""

    description = "operation failed"


class HdfsFileNotFoundError(HdfsError, FileNotFoundError):
    """The file does not exist."""

    description = "file not found"


class BlocksNotFoundError(HdfsError, RuntimeError):
    """No block locations were returned for a file."""

    description = "blocks not found"


class HdfsIsADirectoryError(HdfsError, IsADirectoryError):
    """The path is a directory where a file was expected."""

    description = "path is a directory"


class UnsupportedErasureCodingPolicyError(HdfsError, RuntimeError):
    """The erasure coding policy is not supported."""

    description = "unsupported erasure coding policy"


class ErasureCodingError(HdfsError, RuntimeError):
    """Erasure coded data could not be decoded."""

    description = "erasure coding error"


class UnsupportedFeatureError(HdfsError, NotImplementedError):
    """The requested feature is not supported."""

    description = "operation not supported"


class InternalError(HdfsError, RuntimeError):
    """An internal invariant was broken."""

    description = "interal error, this shouldn't happen"


class InvalidRPCResponseError(HdfsError, RuntimeError):
    """An RPC response could not be decoded."""

    description = "failed to decode RPC response"


class _RemoteError(HdfsError, RuntimeError):
    """An exception reported by the remote server."""

    def __init__(self, exception_class, message):
        self.exception_class = exception_class
        self.message = message
        super().__init__(f"{exception_class}: {message}")


class RPCError(_RemoteError):
    """A recoverable exception returned by the server for an RPC call."""

    description = "RPC error"

    def __init__(self, exception_class, message):
        super().__init__(exception_class, message)


class FatalRPCError(_RemoteError):
    """A fatal exception returned by the server for an RPC call."""

    description = "fatal RPC error"


class SASLError(HdfsError, RuntimeError):
    """A failure during SASL negotiation."""

    description = "SASL error"


class NoSASLMechanismError(HdfsError, RuntimeError):
    """No usable SASL mechanism was offered."""

    description = "No valid SASL mechanism found"