from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from libmacropub.capabilities import (
    Capabilities,
    CapabilitiesRecord,
    save_capabilities_record,
)
from libmacropub.hashing import fingerprint_item
from libmacropub.lexer import serialize_tokens, tokenize_from_raw
from macropub.cli.goals import perform_desired_toolchain_goal
from macropub.cli.parser.arguments import CLIArguments
from macropub.cli.parser.builder import build_cli_parser
from macropub.cli.parser.parser import parse_cli_arguments

if TYPE_CHECKING:
    from libmacropub.lexer import TokenSequence

SIMPLE_MACRO = "macro_rules! m { () => {}; }"


@pytest.fixture(autouse=True)
def _no_build_script_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OUT_DIR", raising=False)


def test_parse_arguments_defaults() -> None:
    args = _parse_args([])
    assert args.source_filepaths == []
    assert args.attribute == ""
    assert args.capabilities_path is None
    assert args.has_simple_decl_macro is None
    assert not args.configure
    assert not args.fingerprint
    assert args.cli_debug_user_friendly_errors


def test_parse_arguments_capabilities_overrides() -> None:
    assert _parse_args(["--has-simple-decl-macro"]).has_simple_decl_macro is True
    assert _parse_args(["--no-simple-decl-macro"]).has_simple_decl_macro is False


def test_parse_arguments_default_capabilities_path(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("OUT_DIR", str(tmp_path))
    args = _parse_args([])
    assert args.capabilities_path == tmp_path / "macropub-capabilities.json"


def test_parse_arguments_exclusive_goals() -> None:
    with pytest.raises(SystemExit) as e:
        _parse_args(["--configure", "--fingerprint"])
    assert e.value.code == 1


def test_parse_arguments_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as e:
        _parse_args([str(tmp_path / "missing.rs")])
    assert e.value.code == 1


def test_rewrite_goal_restricted(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_item(tmp_path, SIMPLE_MACRO)
    output = _perform_goal([str(source), "--attr", "crate"], capsys)
    assert output == _serialized(f"{SIMPLE_MACRO} pub(crate) use m as m;")


def test_rewrite_goal_world_visible(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_item(tmp_path, SIMPLE_MACRO)
    internal = f"macro_impl_{fingerprint_item(_tokenize(SIMPLE_MACRO))}_m"

    output = _perform_goal([str(source)], capsys)
    assert output == _serialized(
        f"#[macro_export] #[doc(hidden)] macro_rules! {internal} {{ () => {{}}; }}"
        f" pub use {internal} as m;",
    )


def test_rewrite_goal_reads_persisted_capabilities(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write_item(tmp_path, SIMPLE_MACRO)
    capabilities_path = tmp_path / "capabilities.json"
    save_capabilities_record(
        capabilities_path,
        CapabilitiesRecord(
            capabilities=Capabilities(has_simple_decl_macro=True),
            probe_digest="",
            rustc="rustc",
        ),
    )

    output = _perform_goal([str(source), "-c", str(capabilities_path)], capsys)
    assert output.startswith("# [cfg (doc)]")
    assert "pub macro m { () => {} , }" in output

    output = _perform_goal(
        [str(source), "-c", str(capabilities_path), "--no-simple-decl-macro"],
        capsys,
    )
    assert output.startswith("# [macro_export]")


def test_rewrite_goal_non_macro_item(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_item(tmp_path, "fn m() {}")
    args = _parse_args([str(source)])
    with pytest.raises(SystemExit) as e:
        perform_desired_toolchain_goal(args)
    # Malformed item is not fatal, compiler reports an error marker instead
    assert e.value.code == 0

    captured = capsys.readouterr()
    assert captured.out.startswith("fn m () {} compile_error !")
    assert "Not an macro definition" in captured.err


def test_rewrite_goal_reads_stdin(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", StringIO(SIMPLE_MACRO))
    output = _perform_goal(["-", "-a", "super"], capsys)
    assert output == _serialized(f"{SIMPLE_MACRO} pub(super) use m as m;")


def test_fingerprint_goal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_item(tmp_path, SIMPLE_MACRO)
    fingerprint = fingerprint_item(_tokenize(SIMPLE_MACRO))

    output = _perform_goal([str(source), "--fingerprint"], capsys)
    assert output == f"{source}\t{fingerprint}\tmacro_impl_{fingerprint}_m"


def test_fingerprint_goal_non_macro_item(tmp_path: Path) -> None:
    source = _write_item(tmp_path, "fn m() {}")
    args = _parse_args([str(source), "--fingerprint"])
    with pytest.raises(SystemExit) as e:
        perform_desired_toolchain_goal(args)
    assert e.value.code == 1


def test_version_goal(capsys: pytest.CaptureFixture[str]) -> None:
    output = _perform_goal(["--version", "--has-simple-decl-macro"], capsys)
    assert output.startswith("[macropub toolchain]")
    assert "has_simple_decl_macro = True" in output


def _perform_goal(argv: list[str], capsys: pytest.CaptureFixture[str]) -> str:
    args = _parse_args(argv)
    with pytest.raises(SystemExit) as e:
        perform_desired_toolchain_goal(args)
    assert e.value.code == 0
    return capsys.readouterr().out.strip()


def _parse_args(argv: list[str]) -> CLIArguments:
    return parse_cli_arguments(build_cli_parser("macropub").parse_args(argv))


def _write_item(directory: Path, text: str) -> Path:
    path = directory / "item.rs"
    path.write_text(text)
    return path


def _tokenize(text: str) -> TokenSequence:
    return tokenize_from_raw("toolchain", text)


def _serialized(text: str) -> str:
    return serialize_tokens(_tokenize(text))
