# core/lexer.py
import math
import re
from typing import Iterator, NamedTuple, Optional, Tuple

from core.errors import MalformedEquationError

SQUARED = "squared"
LINEAR = "linear"
CONSTANT = "constant"
END = "end"

EXPONENT_MARKER = "2"
_DIGITS = "0123456789"

# OCR output tends to carry typographic glyphs instead of ASCII
_DASHES = {
    "−": "-",
    "–": "-",
    "—": "-",
}
# only a square of the unknown becomes the exponent marker; "3²" stays malformed
_SQUARE_RE = re.compile(r"([a-zA-Z])(\^2|²)")

_VARIABLE_RE = re.compile(r"[a-zA-Z]")


class Token(NamedTuple):
    kind: str
    value: float
    text: str


def clean_equation(equation: str) -> str:
    """Drop all whitespace and map OCR glyphs to the ASCII the lexer reads."""
    s = "".join(equation.split())
    s = _SQUARE_RE.sub(r"\g<1>" + EXPONENT_MARKER, s)
    for dash, ascii_ in _DASHES.items():
        s = s.replace(dash, ascii_)
    return s


def identify_variable(equation: str) -> Optional[str]:
    m = _VARIABLE_RE.search(equation)
    return m.group(0) if m else None


def parse_coefficient(text: str) -> float:
    if text in ("", "+"):
        return 1.0
    if text == "-":
        return -1.0
    try:
        value = float(text)
    except ValueError:
        raise MalformedEquationError(f"'{text}' is not a valid number.") from None
    if not math.isfinite(value):
        raise MalformedEquationError(f"'{text}' is too large.")
    return value


def _read_number(side: str, pos: int) -> int:
    """Return the end index of the run `[+-]? digits* ('.' digits*)?` starting at pos."""
    n = len(side)
    if pos < n and side[pos] in "+-":
        pos += 1
    while pos < n and side[pos] in _DIGITS:
        pos += 1
    if pos < n and side[pos] == ".":
        pos += 1
        while pos < n and side[pos] in _DIGITS:
            pos += 1
    return pos


def tokenize(side: str, variable: str) -> Iterator[Token]:
    """
    Lex one side of an equation (no '=') into squared, linear and constant
    tokens, followed by a single END token.

    At every position the squared form wins over the linear form, and the
    linear form over a bare constant, so "3x2" is one squared term and never
    "3x" followed by "2".
    """
    pos = 0
    n = len(side)
    while pos < n:
        end = _read_number(side, pos)
        coef = side[pos:end]
        if end < n and side[end] == variable:
            if end + 1 < n and side[end + 1] == EXPONENT_MARKER:
                yield Token(SQUARED, parse_coefficient(coef), side[pos:end + 2])
                pos = end + 2
            else:
                yield Token(LINEAR, parse_coefficient(coef), side[pos:end + 1])
                pos = end + 1
        elif any(ch in _DIGITS for ch in coef):
            yield Token(CONSTANT, parse_coefficient(coef), coef)
            pos = end
        elif end == pos:
            raise MalformedEquationError(f"Unexpected character '{side[pos]}' in '{side}'.")
        else:
            raise MalformedEquationError(f"'{coef}' is not a valid term in '{side}'.")
    yield Token(END, 0.0, "")


def accumulate(side: str, variable: str, inverse: bool = False) -> Tuple[float, float, float]:
    """Sum the squared, linear and constant tokens of one side."""
    squared = linear = constant = 0.0
    for tok in tokenize(side, variable):
        value = -tok.value if inverse else tok.value
        if tok.kind == SQUARED:
            squared += value
        elif tok.kind == LINEAR:
            linear += value
        elif tok.kind == CONSTANT:
            constant += value
    return squared, linear, constant
