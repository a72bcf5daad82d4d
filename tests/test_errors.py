import pytest

from lsimproved.errors import (
    DescriptionNotFound,
    FailedDisplay,
    FailedLaunchEditor,
    FileOperationFailed,
    InvalidPath,
    LsiError,
    PathNotFound,
    PermissionDenied,
)


def test_description_not_found_message():
    assert str(DescriptionNotFound()) == "Description not found for the specified path"


def test_path_not_found_message():
    assert str(PathNotFound()) == (
        "Path not found: The specified path does not exist or is inaccessible"
    )


def test_invalid_path_message():
    assert str(InvalidPath()) == (
        "Invalid path format: The path contains invalid characters or is malformed"
    )


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (FailedDisplay, "Failed to display output: "),
        (FailedLaunchEditor, "Failed to launch editor: "),
        (FileOperationFailed, "File operation failed: "),
        (PermissionDenied, "Permission denied: Insufficient permissions to access "),
    ],
)
def test_detail_is_embedded(cls, prefix):
    err = cls("boom")
    assert str(err) == prefix + "boom"
    assert err.detail == "boom"


@pytest.mark.parametrize(
    "err, message",
    [
        (DescriptionNotFound(), "Description not found for the specified path"),
        (
            PathNotFound(),
            "Path not found: The specified path does not exist or is inaccessible",
        ),
        (
            InvalidPath(),
            "Invalid path format: The path contains invalid characters or is malformed",
        ),
        (FailedDisplay("x"), "Failed to display output: x"),
    ],
)
def test_all_errors_are_catchable_as_base(err, message):
    with pytest.raises(LsiError) as excinfo:
        raise err
    assert excinfo.value is err
    assert str(excinfo.value) == message