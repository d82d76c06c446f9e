import pytest

from ajisai.errors import (
    ConfigError,
    NoFileToReadError,
    NoFileToWriteError,
    UnsupportedConfigFileError,
)


def test_no_file_to_read_keeps_candidates_and_lists_them():
    error = NoFileToReadError(["/work/ajisai.yaml", "/work/ajisai.yml"])
    assert error.candidate_paths == ["/work/ajisai.yaml", "/work/ajisai.yml"]
    assert str(error) == (
        "could not find config file to read from candidates: "
        "[/work/ajisai.yaml /work/ajisai.yml]"
    )


def test_no_file_to_read_with_no_candidates():
    error = NoFileToReadError([])
    assert error.candidate_paths == []
    assert str(error).startswith("could not find config file to read from candidates")


def test_no_file_to_write_message():
    assert str(NoFileToWriteError()) == "could not find config file to write"


def test_unsupported_config_file_reports_path_and_extension():
    error = UnsupportedConfigFileError("/work/config.unsupported")
    assert error.path == "/work/config.unsupported"
    assert str(error) == (
        "config file path /work/config.unsupported has unsupported extension: .unsupported"
    )


@pytest.mark.parametrize(
    "error",
    [
        NoFileToReadError(["a.yaml"]),
        NoFileToWriteError(),
        UnsupportedConfigFileError("a.json"),
    ],
)
def test_all_errors_are_caught_as_config_error(error):
    with pytest.raises(ConfigError) as caught:
        raise error
    assert caught.value is error