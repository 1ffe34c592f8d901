"""Tokens of a single CSS property value.

References:
    - [values and units](https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_Values_and_Units)
    - [calc()](https://developer.mozilla.org/en-US/docs/Web/CSS/calc)
    - [var()](https://developer.mozilla.org/en-US/docs/Web/CSS/var)
    - [linear-gradient()](https://developer.mozilla.org/en-US/docs/Web/CSS/gradient/linear-gradient)

Every token keeps the text it was formed from in `raw`, including any whitespace
around it that the lexer stepped over, so `''.join(str(t) for t in tokens)` gives
back the value that was tokenized.
"""
from __future__ import annotations
from typing import Any, ClassVar, Literal
from typing_extensions import TypeAliasType

__all__ = [
    "Kind",
    "Token",
    "AnyToken",

    "Operator",
    "Number",
    "Ident",
    "String",
    "Comma",

    "Color",
    "Gradient",
    "Calc",
    "Url",
    "Variable",
]

Kind = TypeAliasType(
    "Kind",
    Literal[
        "operator",
        "number",
        "color",
        "gradient",
        "calc",
        "url",
        "variable",
        "ident",
        "string",
        "comma",
    ],
)

class Token:
    type: ClassVar[Kind]
    # Names of the kind specific attributes, in record order
    fields: ClassVar[tuple[str, ...]] = ()

    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def record(self) -> dict[str, Any]:
        """The token as a plain mapping: `type` followed by the kind's fields."""
        return {"type": self.type, **{name: getattr(self, name) for name in self.fields}}

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw.strip()!r})'

    def __str__(self) -> str:
        return self.raw

class Operator(Token):
    type = "operator"
    fields = ("value",)
    value: Literal['/'] = '/'
    def __init__(self, raw: str = '/'):
        super().__init__(raw)

class Comma(Token):
    type = "comma"
    fields = ("string",)
    string: Literal[','] = ','
    def __init__(self, raw: str = ','):
        super().__init__(raw)

class Ident(Token):
    type = "ident"
    fields = ("string",)
    def __init__(self, string: str, raw: str = ''):
        self.string = string
        super().__init__(raw or string)

class Number(Token):
    type = "number"
    fields = ("string", "unit", "value")
    value: int | float
    def __init__(self, value: int | float, unit: str, string: str, raw: str = ''):
        self.value = value
        self.unit = unit
        self.string = string
        super().__init__(raw or string)

    def __repr__(self) -> str:
        return f"Number({self.value!r}{self.unit})"

class String(Token):
    type = "string"
    fields = ("quote", "string", "value")
    quote: Literal["'", '"']
    def __init__(self, value: str, quote: Literal["'", '"'], raw: str = ''):
        self.value = value
        self.quote = quote
        super().__init__(raw or self.string)

    @property
    def string(self) -> str:
        return f"{self.quote}{self.value}{self.quote}"

class Function(Token):
    """Base of the tokens written as `name(...)`; `value` holds the name and the whole argument list.

    Only the subclasses are tokens, `Function` itself has no kind.
    """
    fields = ("value",)
    def __init__(self, value: str, raw: str = ''):
        if type(self) is Function:
            raise TypeError("Function is a base class, use Color, Gradient, Calc, Url or Variable")
        self.value = value
        super().__init__(raw or value)

class Color(Function):
    type = "color"
class Gradient(Function):
    type = "gradient"
class Calc(Function):
    type = "calc"
class Url(Function):
    type = "url"
class Variable(Function):
    type = "variable"

AnyToken = TypeAliasType(
    "AnyToken",
    Operator | Number | Color | Gradient | Calc | Url | Variable | Ident | String | Comma,
)
