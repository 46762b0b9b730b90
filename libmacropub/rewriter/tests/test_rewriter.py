from pathlib import Path

from libmacropub.capabilities import Capabilities
from libmacropub.hashing import fingerprint_item
from libmacropub.lexer.lexer import tokenize_from_raw
from libmacropub.lexer.serializer import serialize_tokens
from libmacropub.lexer.tokens import Identifier, Punctuation, TokenSequence
from libmacropub.rewriter import (
    ERROR_MARKER,
    ERROR_MARKER_MESSAGE,
    AttributeRewriter,
    internal_macro_name,
    rewrite_arm_separators,
    rewrite_macro_pub,
)

SIMPLE_MACRO = "macro_rules! m { () => {}; }"

WITH_DECL_MACRO = Capabilities(has_simple_decl_macro=True)
WITHOUT_DECL_MACRO = Capabilities(has_simple_decl_macro=False)


def test_rewrite_world_visible_without_decl_macro() -> None:
    item = _tokenize(SIMPLE_MACRO)
    internal = f"macro_impl_{fingerprint_item(item)}_m"

    output = rewrite_macro_pub((), item, capabilities=WITHOUT_DECL_MACRO)
    assert output == _tokenize(
        f"#[macro_export] #[doc(hidden)] macro_rules! {internal} {{ () => {{}}; }}"
        f" pub use {internal} as m;",
    )


def test_rewrite_crate_visible() -> None:
    item = _tokenize(SIMPLE_MACRO)
    for capabilities in (WITH_DECL_MACRO, WITHOUT_DECL_MACRO):
        output = rewrite_macro_pub(_tokenize("crate"), item, capabilities=capabilities)
        assert output == _tokenize(f"{SIMPLE_MACRO} pub(crate) use m as m;")


def test_rewrite_restricted_path_is_passed_verbatim() -> None:
    item = _tokenize(SIMPLE_MACRO)
    output = rewrite_macro_pub(
        _tokenize("in super::module"),
        item,
        capabilities=WITHOUT_DECL_MACRO,
    )
    assert output == _tokenize(f"{SIMPLE_MACRO} pub(in super::module) use m as m;")


def test_rewrite_world_visible_with_decl_macro() -> None:
    item = _tokenize(SIMPLE_MACRO)
    internal = f"macro_impl_{fingerprint_item(item)}_m"

    output = rewrite_macro_pub((), item, capabilities=WITH_DECL_MACRO)
    assert output == _tokenize(
        '#[cfg(doc)] #[rustc_macro_transparency = "semitransparent"]'
        " pub macro m { () => {}, }"
        " #[cfg(not(doc))] #[macro_export] #[doc(hidden)]"
        f" macro_rules! {internal} {{ () => {{}}; }}"
        f" #[cfg(not(doc))] pub use {internal} as m;",
    )


def test_rewrite_duplicates_attributes_for_both_variants() -> None:
    item = _tokenize(f"/// Docs\n{SIMPLE_MACRO}")
    internal = f"macro_impl_{fingerprint_item(item)}_m"

    output = rewrite_macro_pub((), item, capabilities=WITH_DECL_MACRO)
    assert output == _tokenize(
        '#[doc = " Docs"]'
        ' #[cfg(doc)] #[rustc_macro_transparency = "semitransparent"]'
        " pub macro m { () => {}, }"
        ' #[doc = " Docs"]'
        " #[cfg(not(doc))] #[macro_export] #[doc(hidden)]"
        f" macro_rules! {internal} {{ () => {{}}; }}"
        f" #[cfg(not(doc))] pub use {internal} as m;",
    )


def test_rewrite_non_macro_item() -> None:
    item = _tokenize("fn m() {}")
    for attr in ((), _tokenize("crate")):
        output = rewrite_macro_pub(attr, item, capabilities=WITH_DECL_MACRO)
        assert output == (*item, *ERROR_MARKER)
        assert serialize_tokens(output).endswith(
            f'compile_error ! {{ "{ERROR_MARKER_MESSAGE}" }}',
        )


def test_rewrite_error_marker_is_located_at_item() -> None:
    item = tokenize_from_raw(Path("lib.rs"), "\n  fn m() {}")
    output = rewrite_macro_pub((), item, capabilities=WITHOUT_DECL_MACRO)

    marker = output[len(item) :]
    assert marker == ERROR_MARKER
    for token in marker:
        assert token.location == item[0].location


def test_rewrite_malformed_macro_items() -> None:
    for text in (
        "macro_rules m { () => {}; }",
        "macro_rules! { () => {}; }",
        "macro_rules! m ( () => {} );",
        "# macro_rules! m { () => {}; }",
        "",
    ):
        item = _tokenize(text)
        output = rewrite_macro_pub((), item, capabilities=WITHOUT_DECL_MACRO)
        assert output[len(item) :] == ERROR_MARKER


def test_rewrite_keeps_trailing_tokens() -> None:
    item = _tokenize(f"{SIMPLE_MACRO} fn other() {{}}")
    trailing = _tokenize("fn other() {}")

    for attr in ((), _tokenize("crate")):
        for capabilities in (WITH_DECL_MACRO, WITHOUT_DECL_MACRO):
            output = rewrite_macro_pub(attr, item, capabilities=capabilities)
            assert output[-len(trailing) :] == trailing


def test_rewrite_preserves_public_name() -> None:
    item = _tokenize(SIMPLE_MACRO)
    for attr in ((), _tokenize("crate"), _tokenize("super")):
        for capabilities in (WITH_DECL_MACRO, WITHOUT_DECL_MACRO):
            output = rewrite_macro_pub(attr, item, capabilities=capabilities)
            assert output[-3:] == (Identifier("as"), Identifier("m"), Punctuation(";"))


def test_rewrite_is_deterministic() -> None:
    rewriter = AttributeRewriter(WITH_DECL_MACRO)
    first = rewriter.rewrite((), _tokenize(SIMPLE_MACRO))
    second = rewriter.rewrite((), _tokenize(SIMPLE_MACRO))
    assert first == second
    assert serialize_tokens(first) == serialize_tokens(second)


def test_rewriter_defaults_to_no_capabilities() -> None:
    item = _tokenize(SIMPLE_MACRO)
    assert AttributeRewriter().rewrite((), item) == rewrite_macro_pub(
        (),
        item,
        capabilities=WITHOUT_DECL_MACRO,
    )


def test_internal_name_is_stable_across_locations() -> None:
    in_file = tokenize_from_raw(Path("lib.rs"), f"\n\n    {SIMPLE_MACRO}")
    generated = _tokenize(SIMPLE_MACRO)
    name = Identifier("m")
    assert internal_macro_name(in_file, name) == internal_macro_name(generated, name)


def test_internal_name_differs_for_different_items() -> None:
    name = Identifier("m")
    names = {
        internal_macro_name(_tokenize(text), name).text
        for text in (
            "macro_rules! m { () => {}; }",
            "macro_rules! m { () => { 1 }; }",
            "#[doc = \"x\"] macro_rules! m { () => {}; }",
            "macro_rules! n { () => {}; }",
        )
    }
    assert len(names) == 4


def test_internal_name_format() -> None:
    item = _tokenize(SIMPLE_MACRO)
    internal = internal_macro_name(item, Identifier("m"))
    assert internal.text.startswith("macro_impl_")
    assert internal.text.endswith("_m")

    fingerprint = internal.text.removeprefix("macro_impl_").removesuffix("_m")
    assert fingerprint.isdigit()
    assert int(fingerprint) == fingerprint_item(item) < 2**128


def test_rewrite_raw_identifier_name() -> None:
    item = _tokenize("macro_rules! r#try { () => {}; }")
    internal = f"macro_impl_{fingerprint_item(item)}_try"
    assert internal_macro_name(item, Identifier("r#try")).text == internal

    for capabilities in (WITH_DECL_MACRO, WITHOUT_DECL_MACRO):
        output = rewrite_macro_pub((), item, capabilities=capabilities)
        assert f"macro_rules ! {internal} {{" in serialize_tokens(output)
        assert output[-3:] == (Identifier("as"), Identifier("r#try"), Punctuation(";"))
        # Emitted text must lex back into same tokens
        assert _tokenize(serialize_tokens(output)) == output


def test_rewrite_arm_separators_top_level_only() -> None:
    (arms,) = _tokenize("{ ($x:expr) => { a; b; }; () => {} }")
    (expected,) = _tokenize("{ ($x:expr) => { a; b; }, () => {} }")
    assert rewrite_arm_separators(arms) == expected


def _tokenize(text: str) -> TokenSequence:
    return tokenize_from_raw("toolchain", text)
