"""Tests for the lexical signature classifier."""

from __future__ import annotations

import pytest

from debugdecoders.signatures import LexicalClassifier, type_variables
from tests._fixtures.modules import make_module


@pytest.mark.parametrize(
    "signature",
    [
        "Json.Decode.Decoder Int",
        "Json.Decode.Decoder (List String)",
        "Json.Decode.Decoder Main.User",
    ],
)
def test_decoder_values_are_recognised(classifier: LexicalClassifier, signature: str) -> None:
    assert classifier.is_decoder(signature) is True


@pytest.mark.parametrize(
    "signature",
    [
        "String -> Json.Decode.Decoder Int",
        "Json.Decode.Decoder Int -> Json.Decode.Decoder Int",
        "Json.Decode.Decoder a -> Html.Html msg",
    ],
)
def test_signatures_with_arrows_are_never_decoders(classifier: LexicalClassifier, signature: str) -> None:
    assert classifier.is_decoder(signature) is False


def test_decoder_requires_exact_leading_token(classifier: LexicalClassifier) -> None:
    assert classifier.is_decoder("Decoder Int") is False
    assert classifier.is_decoder("Json.Decode.DecoderInt") is False
    assert classifier.is_decoder(" Json.Decode.Decoder Int") is False
    assert classifier.is_decoder("") is False


def test_simple_views_accept_values_and_single_argument_functions(classifier: LexicalClassifier) -> None:
    assert classifier.is_simple_view("Html.Html msg") is True
    assert classifier.is_simple_view("Int -> Html.Html msg") is True
    assert classifier.is_simple_view("  Main.Model   ->   Html.Html Msg  ") is True


def test_simple_views_reject_curried_functions(classifier: LexicalClassifier) -> None:
    assert classifier.is_simple_view("Int -> String -> Html.Html msg") is False
    assert classifier.is_simple_view("a -> b -> c -> Html.Html msg") is False


def test_simple_views_need_a_parameterised_html_result(classifier: LexicalClassifier) -> None:
    assert classifier.is_simple_view("Int -> Html.Html") is False
    assert classifier.is_simple_view("Int -> String") is False
    assert classifier.is_simple_view("Int -> Html.Attribute msg") is False
    assert classifier.is_simple_view("") is False


def test_custom_type_names(classifier: LexicalClassifier) -> None:
    custom = LexicalClassifier(decoder_type="Decode.Decoder", view_type="Html")
    assert custom.is_decoder("Decode.Decoder Int") is True
    assert custom.is_decoder("Json.Decode.Decoder Int") is False
    assert custom.is_simple_view("Int -> Html msg") is True
    assert classifier.is_simple_view("Int -> Html msg") is False


def test_decoder_payload_and_view_input(classifier: LexicalClassifier) -> None:
    assert classifier.decoder_payload("Json.Decode.Decoder Int") == "Int"
    assert classifier.decoder_payload("Json.Decode.Decoder  (List Int) ") == "(List Int)"
    assert classifier.decoder_payload("Json.Decode.Decoder") == ""
    assert classifier.view_input(" Int  -> Html.Html msg") == "Int"
    assert classifier.view_input("Html.Html msg") is None
    assert classifier.view_input("a -> b -> Html.Html msg") is None


def test_filters_are_stable_and_return_new_modules(classifier: LexicalClassifier) -> None:
    module = make_module(
        "Main",
        ("viewUser", "Main.User -> Html.Html msg"),
        ("decodeUser", "Json.Decode.Decoder Main.User"),
        ("update", "Msg -> Model -> ( Model, Cmd Msg )"),
        ("decodeAge", "Json.Decode.Decoder Int"),
        ("title", "Html.Html msg"),
    )

    decoders = classifier.only_decoders(module)
    views = classifier.only_simple_views(module)
    both = classifier.only_decoders_and_views(module)

    assert decoders is not module
    assert decoders.module_name == "Main"
    assert [item.name for item in decoders.signatures] == ["decodeUser", "decodeAge"]
    assert [item.name for item in views.signatures] == ["viewUser", "title"]
    assert [item.name for item in both.signatures] == ["viewUser", "decodeUser", "decodeAge", "title"]
    assert len(module.signatures) == 5


def test_filter_modules_applies_selector_to_each_module(classifier: LexicalClassifier) -> None:
    modules = [
        make_module("A", ("a", "Json.Decode.Decoder Int")),
        make_module("B", ("b", "Int -> Html.Html msg")),
    ]

    filtered = classifier.filter_modules(modules, classifier.only_decoders)

    assert [module.module_name for module in filtered] == ["A", "B"]
    assert [len(module.signatures) for module in filtered] == [1, 0]


@pytest.mark.parametrize("text", ["->", "-> -> ->", "(((", "\t\n", "Json.Decode.Decoder\tInt -> "])
def test_classification_is_total(classifier: LexicalClassifier, text: str) -> None:
    classifier.is_decoder(text)
    classifier.is_simple_view(text)
    classifier.decoder_payload(text)
    classifier.view_input(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(List a)", ["a"]),
        ("a", ["a"]),
        ("Dict.Dict comparable v", ["comparable", "v"]),
        ("{ a | name : String }", ["a"]),
        ("{ name : String }", []),
        ("Main.User", []),
        ("(List Int)", []),
    ],
)
def test_type_variables_ignore_qualified_names_and_field_labels(text: str, expected: list) -> None:
    assert type_variables(text) == expected
