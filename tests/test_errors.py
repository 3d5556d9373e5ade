import pytest

from hdfskit.errors import (
    AlreadyExistsError,
    BlocksNotFoundError,
    ChecksumError,
    DataTransferError,
    ErasureCodingError,
    FatalRPCError,
    HdfsError,
    HdfsFileNotFoundError,
    HdfsIOError,
    HdfsIsADirectoryError,
    InternalError,
    InvalidArgumentError,
    InvalidPathError,
    InvalidRPCResponseError,
    NoSASLMechanismError,
    OperationFailedError,
    RPCError,
    SASLError,
    UnsupportedErasureCodingPolicyError,
    UnsupportedFeatureError,
    UrlParseError,
)


@pytest.mark.parametrize(
    "error_class, builtin",
    [
        (HdfsIOError, OSError),
        (AlreadyExistsError, FileExistsError),
        (HdfsFileNotFoundError, FileNotFoundError),
        (HdfsIsADirectoryError, IsADirectoryError),
        (UnsupportedFeatureError, NotImplementedError),
        (DataTransferError, RuntimeError),
        (InvalidPathError, RuntimeError),
        (InvalidArgumentError, RuntimeError),
        (UrlParseError, RuntimeError),
        (OperationFailedError, RuntimeError),
        (BlocksNotFoundError, RuntimeError),
        (UnsupportedErasureCodingPolicyError, RuntimeError),
        (ErasureCodingError, RuntimeError),
        (InternalError, RuntimeError),
        (InvalidRPCResponseError, RuntimeError),
        (SASLError, RuntimeError),
    ],
)
def test_caught_as_builtin_with_detail(error_class, builtin):
    error = error_class("/some/path")
    assert isinstance(error, builtin)
    assert isinstance(error, HdfsError)
    assert str(error) == "/some/path"
    assert error.detail == "/some/path"


@pytest.mark.parametrize(
    "error_class",
    [HdfsIOError, HdfsFileNotFoundError, ChecksumError, NoSASLMechanismError],
)
def test_caught_as_hdfs_error(error_class):
    with pytest.raises(HdfsError) as info:
        raise error_class()
    assert info.value.detail is None
    assert str(info.value) == error_class.description


def test_checksum_error_default_message():
    assert str(ChecksumError()) == "checksums didn't match"


def test_no_sasl_mechanism_message():
    assert str(NoSASLMechanismError()) == "No valid SASL mechanism found"


def test_invalid_argument_default_message():
    assert str(InvalidArgumentError()) == "invalid argument"


def test_rpc_error_keeps_class_and_message():
    error = RPCError("java.lang.UnsupportedOperationException", "NEW_BLOCK required")
    assert error.exception_class == "java.lang.UnsupportedOperationException"
    assert error.message == "NEW_BLOCK required"
    assert "NEW_BLOCK required" in str(error)
    assert "java.lang.UnsupportedOperationException" in str(error)


def test_fatal_rpc_error_is_distinct_from_rpc_error():
    error = FatalRPCError("SomeException", "boom")
    assert not isinstance(error, RPCError)
    assert error.exception_class == "SomeException"
    assert error.message == "boom"


def test_rpc_error_not_caught_as_fatal():
    error = RPCError("SomeException", "retry")
    assert not isinstance(error, FatalRPCError)
    assert error.exception_class == "SomeException"
    assert "retry" in str(error)