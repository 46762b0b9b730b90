from pathlib import Path

import pytest

from libmacropub.capabilities import (
    HAS_SIMPLE_DECL_MACRO_CFG,
    Capabilities,
    CapabilitiesRecord,
    load_capabilities,
    load_capabilities_record,
    save_capabilities_record,
)
from libmacropub.capabilities.errors import MalformedCapabilitiesFileError


def test_capabilities_default_to_unsupported() -> None:
    assert Capabilities().has_simple_decl_macro is False
    assert Capabilities().enabled_cfgs() == []
    assert Capabilities(has_simple_decl_macro=True).enabled_cfgs() == [
        HAS_SIMPLE_DECL_MACRO_CFG,
    ]


def test_load_missing_capabilities(tmp_path: Path) -> None:
    path = tmp_path / "capabilities.json"
    assert load_capabilities_record(path) is None
    assert load_capabilities(path) == Capabilities()


def test_save_and_load_capabilities(tmp_path: Path) -> None:
    path = tmp_path / "capabilities.json"
    record = CapabilitiesRecord(
        capabilities=Capabilities(has_simple_decl_macro=True),
        probe_digest="digest",
        rustc="rustc",
        target="thumbv7em-none-eabihf",
        rustflags=("-C", "opt-level=2"),
    )
    save_capabilities_record(path, record)

    assert load_capabilities_record(path) == record
    assert load_capabilities(path) == Capabilities(has_simple_decl_macro=True)


def test_load_capabilities_missing_flag(tmp_path: Path) -> None:
    path = tmp_path / "capabilities.json"
    path.write_text("{}")
    assert load_capabilities(path) == Capabilities()


def test_load_malformed_capabilities(tmp_path: Path) -> None:
    path = tmp_path / "capabilities.json"
    for content in (
        "not json",
        "[]",
        '{"has_simple_decl_macro": "yes"}',
        '{"rustflags": "-C opt-level=2"}',
        '{"rustflags": [1]}',
    ):
        path.write_text(content)
        with pytest.raises(MalformedCapabilitiesFileError):
            load_capabilities(path)


def test_capabilities_record_staleness() -> None:
    record = CapabilitiesRecord(
        capabilities=Capabilities(),
        probe_digest="digest",
        rustc="rustc",
    )
    assert not record.is_stale(probe_digest="digest", rustc="rustc", target=None)
    assert record.is_stale(probe_digest="other", rustc="rustc", target=None)
    assert record.is_stale(probe_digest="digest", rustc="/opt/rustc", target=None)
    assert record.is_stale(probe_digest="digest", rustc="rustc", target="x86_64")
    assert record.is_stale(
        probe_digest="digest",
        rustc="rustc",
        target=None,
        rustflags=("-Zallow-features=",),
    )
