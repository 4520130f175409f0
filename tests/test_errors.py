"""Tests for error kinds and classification."""

import errno

import pytest

from vosa.errors import (
    EntryError,
    ErrorKind,
    ExistsError,
    NotDirectoryError,
    NotEmptyError,
    NotExistError,
    NotFileError,
    OperationFailedError,
    PathError,
    is_exist,
    is_not_exist,
    kind_of,
    path_error,
)


class TestPathError:
    """Test PathError construction and builtin compatibility."""

    @pytest.mark.parametrize(
        "kind,cls,builtin",
        [
            (ErrorKind.EXISTS, ExistsError, FileExistsError),
            (ErrorKind.NOT_EXIST, NotExistError, FileNotFoundError),
            (ErrorKind.NOT_DIRECTORY, NotDirectoryError, NotADirectoryError),
            (ErrorKind.NOT_FILE, NotFileError, IsADirectoryError),
            (ErrorKind.NOT_EMPTY, NotEmptyError, OSError),
            (ErrorKind.OPERATION_FAILED, OperationFailedError, OSError),
        ],
    )
    def test_path_error_types(self, kind, cls, builtin):
        """Each kind maps to a PathError that is also the builtin OSError type."""
        err = path_error(kind, "mkdir", "/a/b")
        assert type(err) is cls
        assert isinstance(err, PathError)
        assert isinstance(err, builtin)
        assert err.kind is kind
        assert err.errno == kind.errno

    def test_carries_op_and_path(self):
        err = NotExistError("stat", "/missing")
        assert err.op == "stat"
        assert err.filename == "/missing"
        assert str(err) == "stat /missing: file does not exist"

    def test_caught_by_builtin_handler(self):
        with pytest.raises(FileNotFoundError):
            raise NotExistError("open", "/x")

    def test_not_empty_errno(self):
        assert NotEmptyError("remove", "/d").errno == errno.ENOTEMPTY


class TestKindOf:
    """Test kind_of(), is_exist() and is_not_exist()."""

    def test_virtual_errors(self):
        assert kind_of(ExistsError("mkdir", "/a")) is ErrorKind.EXISTS
        assert kind_of(EntryError(ErrorKind.NOT_EMPTY)) is ErrorKind.NOT_EMPTY

    def test_host_errors_by_errno(self):
        """Plain OSErrors from the host are classified by errno."""
        assert kind_of(FileNotFoundError(errno.ENOENT, "nope", "/x")) is ErrorKind.NOT_EXIST
        assert kind_of(FileExistsError(errno.EEXIST, "dup", "/x")) is ErrorKind.EXISTS
        assert kind_of(OSError(errno.ENOTEMPTY, "full")) is ErrorKind.NOT_EMPTY
        assert kind_of(IsADirectoryError(errno.EISDIR, "dir")) is ErrorKind.NOT_FILE

    def test_unknown_errors(self):
        assert kind_of(None) is None
        assert kind_of(ValueError("bad")) is None
        assert kind_of(OSError("no errno")) is None
        assert kind_of(OSError(errno.EACCES, "denied")) is None

    def test_predicates(self):
        assert is_exist(ExistsError("mkdir", "/a")) is True
        assert is_exist(NotExistError("stat", "/a")) is False
        assert is_not_exist(NotExistError("stat", "/a")) is True
        assert is_not_exist(NotDirectoryError("stat", "/a")) is False
        assert is_not_exist(None) is False
