from pathlib import Path

from libmacropub.lexer.lexer import tokenize_from_raw
from libmacropub.lexer.serializer import serialize_token, serialize_tokens
from libmacropub.lexer.tokens import Delimiter, Group, Identifier


def test_serialize_macro_definition() -> None:
    tokens = tokenize_from_raw("toolchain", "macro_rules! m { () => {}; }")
    assert serialize_tokens(tokens) == "macro_rules ! m { () => {} ; }"


def test_serialize_joint_punctuation() -> None:
    tokens = tokenize_from_raw("toolchain", "a::b => 'a")
    assert serialize_tokens(tokens) == "a :: b => 'a"


def test_serialize_groups() -> None:
    assert serialize_token(Group(Delimiter.BRACE)) == "{}"
    assert serialize_token(Group(Delimiter.PARENTHESIS, (Identifier("x"),))) == "(x)"
    assert serialize_token(Group(Delimiter.BRACKET, (Identifier("x"),))) == "[x]"
    assert serialize_token(Group(Delimiter.BRACE, (Identifier("x"),))) == "{ x }"


def test_serialize_does_not_depend_on_layout() -> None:
    compact = tokenize_from_raw("toolchain", "macro_rules!m{()=>{};}")
    spread = tokenize_from_raw(
        Path("item.rs"),
        "macro_rules  !  m {\n  // comment\n  () => {} ;\n}\n",
    )
    assert serialize_tokens(compact) == serialize_tokens(spread)


def test_serialize_tokenize_back() -> None:
    text = '#[doc = "x"] macro_rules! m { ($a:expr, $($b:tt)*) => { $a + 1.5 }; }'
    tokens = tokenize_from_raw("toolchain", text)
    assert tokenize_from_raw("toolchain", serialize_tokens(tokens)) == tokens
