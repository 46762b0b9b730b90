from pathlib import Path

import pytest

from libmacropub.prober import ProberEnvironment, read_encoded_rustflags, split_encoded_flags
from libmacropub.prober.errors import (
    MissingEncodedFlagsError,
    MissingOutputDirectoryError,
    OutputDirectoryNotWritableError,
)


def test_split_encoded_flags() -> None:
    assert split_encoded_flags("") == []
    assert split_encoded_flags("-Copt-level=2") == ["-Copt-level=2"]
    assert split_encoded_flags("-C\x1fopt-level=2") == ["-C", "opt-level=2"]
    # Spaces are not separators, flags are forwarded verbatim
    assert split_encoded_flags('--cfg\x1ffeature="a b"') == ["--cfg", 'feature="a b"']
    assert split_encoded_flags("a\x1f\x1fb") == ["a", "", "b"]


def test_read_encoded_rustflags_ignores_other_variables() -> None:
    environ = {"CARGO_ENCODED_RUSTFLAGS": "", "RUSTFLAGS": "-C opt-level=3"}
    assert read_encoded_rustflags(environ) == []


def test_read_missing_encoded_rustflags() -> None:
    with pytest.raises(MissingEncodedFlagsError):
        read_encoded_rustflags({"RUSTFLAGS": "-C opt-level=3"})


def test_environment_from_mapping(tmp_path: Path) -> None:
    environment = ProberEnvironment.from_mapping(
        {
            "OUT_DIR": str(tmp_path),
            "RUSTC": "/opt/rustc",
            "TARGET": "x86_64-unknown-linux-gnu",
            "CARGO_ENCODED_RUSTFLAGS": "-C\x1fopt-level=2",
        },
    )
    assert environment == ProberEnvironment(
        out_dir=tmp_path,
        rustc="/opt/rustc",
        target="x86_64-unknown-linux-gnu",
        rustflags=("-C", "opt-level=2"),
    )


def test_environment_defaults(tmp_path: Path) -> None:
    environment = ProberEnvironment.from_mapping(
        {"OUT_DIR": str(tmp_path), "CARGO_ENCODED_RUSTFLAGS": ""},
    )
    assert environment.rustc == "rustc"
    assert environment.target is None
    assert environment.rustflags == ()


def test_environment_is_immutable(tmp_path: Path) -> None:
    environ = {"OUT_DIR": str(tmp_path), "CARGO_ENCODED_RUSTFLAGS": "-C\x1fopt-level=2"}
    environment = ProberEnvironment.from_mapping(environ)
    assert isinstance(environment.rustflags, tuple)
    assert hash(environment) == hash(ProberEnvironment.from_mapping(environ))


def test_environment_missing_output_directory() -> None:
    with pytest.raises(MissingOutputDirectoryError):
        ProberEnvironment.from_mapping({"CARGO_ENCODED_RUSTFLAGS": ""})


def test_environment_missing_encoded_flags(tmp_path: Path) -> None:
    with pytest.raises(MissingEncodedFlagsError):
        ProberEnvironment.from_mapping({"OUT_DIR": str(tmp_path)})


def test_environment_output_directory_does_not_exist(tmp_path: Path) -> None:
    with pytest.raises(OutputDirectoryNotWritableError):
        ProberEnvironment.from_mapping(
            {"OUT_DIR": str(tmp_path / "missing"), "CARGO_ENCODED_RUSTFLAGS": ""},
        )
