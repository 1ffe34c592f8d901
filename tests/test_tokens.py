"""Tests for the token classes."""

import pytest

from cssvalue.tokens import Calc, Color, Comma, Function, Gradient, Ident, Number, Operator, String, Url, Variable


class TestRecords:
    @pytest.mark.parametrize(
        ("token", "record"),
        [
            (Operator(), {"type": "operator", "value": "/"}),
            (Comma(), {"type": "comma", "string": ","}),
            (Ident("auto"), {"type": "ident", "string": "auto"}),
            (Number(2, "", "2"), {"type": "number", "string": "2", "unit": "", "value": 2}),
            (
                String("a b", '"'),
                {"type": "string", "quote": '"', "string": '"a b"', "value": "a b"},
            ),
            (Color("rgb(0,0,0)"), {"type": "color", "value": "rgb(0,0,0)"}),
            (Url("url(a.png)"), {"type": "url", "value": "url(a.png)"}),
            (Calc("calc(1px)"), {"type": "calc", "value": "calc(1px)"}),
            (Variable("var(--x)"), {"type": "variable", "value": "var(--x)"}),
            (Gradient("linear-gradient(red, blue)"), {"type": "gradient", "value": "linear-gradient(red, blue)"}),
        ],
    )
    def test_record(self, token, record):
        assert token.record() == record

    def test_record_keys_are_ordered(self):
        assert list(Number(1.5, "em", "1.5em").record()) == ["type", "string", "unit", "value"]


class TestRaw:
    def test_defaults_to_source_form(self):
        assert str(Operator()) == "/"
        assert str(Comma()) == ","
        assert str(Ident("auto")) == "auto"
        assert str(String("hi", "'")) == "'hi'"
        assert str(Number(1, "px", "1px")) == "1px"
        assert str(Calc("calc(1px)")) == "calc(1px)"

    def test_keeps_surrounding_whitespace(self):
        token = Ident("auto", " auto  ")
        assert str(token) == " auto  "
        assert repr(token) == "Ident('auto')"

    def test_number_repr(self):
        assert repr(Number(10, "%", "10%")) == "Number(10%)"


class TestFunctionKinds:
    @pytest.mark.parametrize("kind", [Color, Gradient, Calc, Url, Variable])
    def test_share_function_base(self, kind):
        assert issubclass(kind, Function)
        assert kind.fields == ("value",)

    def test_kind_tags_are_distinct(self):
        kinds = [Operator, Number, Color, Gradient, Calc, Url, Variable, Ident, String, Comma]
        assert len({kind.type for kind in kinds}) == len(kinds)

    def test_function_base_is_not_a_token(self):
        with pytest.raises(TypeError):
            Function("name(x)")
