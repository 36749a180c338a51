# core/solver.py
import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from core.errors import EquationError, MalformedEquationError, NoVariableError
from core.lexer import accumulate, clean_equation, identify_variable
from core.verify import check_solution
from utils import messages

EPSILON = 1e-9


class Coefficients(NamedTuple):
    """a*x^2 + b*x + c = 0"""
    a: float
    b: float
    c: float


# ---------------------------
# Results
# ---------------------------
@dataclass(frozen=True)
class InfiniteSolutions:
    kind = "infinite_solutions"


@dataclass(frozen=True)
class NoSolution:
    kind = "no_solution"


@dataclass(frozen=True)
class OneRealRoot:
    x: float
    degree: int = 2
    kind = "one_real_root"


@dataclass(frozen=True)
class TwoRealRoots:
    x1: float
    x2: float
    kind = "two_real_roots"


@dataclass(frozen=True)
class TwoComplexRoots:
    """real ± imag·i, imag is always reported as a non-negative magnitude."""
    real: float
    imag: float
    kind = "two_complex_roots"


# ---------------------------
# Normalizer
# ---------------------------
def parse_equation(equation: str) -> Tuple[str, Coefficients]:
    """Return the unknown and the canonical (a, b, c) of `equation`."""
    s = clean_equation(equation)

    var = identify_variable(s)
    if not var:
        raise NoVariableError()

    parts = s.split("=")
    if len(parts) != 2:
        raise MalformedEquationError("The equation must contain exactly one '='.")
    left, right = parts

    a_l, b_l, c_l = accumulate(left, var)
    a_r, b_r, c_r = accumulate(right, var, inverse=True)
    coeffs = Coefficients(a_l + a_r, b_l + b_r, c_l + c_r)
    if not all(math.isfinite(v) for v in coeffs):
        raise MalformedEquationError("The coefficients are too large.")
    return var, coeffs


def normalize(equation: str) -> Coefficients:
    return parse_equation(equation)[1]


# ---------------------------
# Solution paths
# ---------------------------
def _unsigned_zero(v: float) -> float:
    return v + 0.0


def _finite(*values: float):
    if not all(math.isfinite(v) for v in values):
        raise MalformedEquationError("The coefficients are too large to solve in floating point.")


def solve_linear(b: float, c: float):
    """Solve b*x + c = 0."""
    if abs(b) <= EPSILON:
        if abs(c) <= EPSILON:
            return InfiniteSolutions()
        return NoSolution()
    x = -c / b
    _finite(x)
    return OneRealRoot(_unsigned_zero(x), degree=1)


def solve_quadratic(a: float, b: float, c: float):
    """Solve a*x^2 + b*x + c = 0; a vanishing leading coefficient goes to the linear path."""
    if abs(a) <= EPSILON:
        return solve_linear(b, c)

    delta = b * b - 4 * a * c
    _finite(delta)
    if abs(delta) <= EPSILON:
        x = -b / (2 * a)
        _finite(x)
        return OneRealRoot(_unsigned_zero(x), degree=2)
    if delta > 0:
        root = math.sqrt(delta)
        x1 = (-b + root) / (2 * a)
        x2 = (-b - root) / (2 * a)
        _finite(x1, x2)
        return TwoRealRoots(_unsigned_zero(x1), _unsigned_zero(x2))
    real = -b / (2 * a)
    imag = abs(math.sqrt(-delta) / (2 * a))
    _finite(real, imag)
    return TwoComplexRoots(_unsigned_zero(real), imag)


def solve(a: float, b: float, c: float):
    """Pick the degree-2, degree-1 or degenerate branch for the canonical triple."""
    if abs(a) > EPSILON:
        return solve_quadratic(a, b, c)
    return solve_linear(b, c)


# ---------------------------
# Entry point used by the UI, CLI and batch mode
# ---------------------------
def solve_equation_local(question: str):
    """
    Solve a typed or OCR'd equation and describe the working.

    Returns None for blank input. Otherwise a dict with "answer", "steps" and
    "kind"; successful solves add "variable", "coefficients", "result" and
    "checked", failures add "error" with the error kind.
    """
    q = (question or "").strip()
    if not q:
        return None

    # Allow "solve 2x+3=7" style
    parts = q.split(None, 1)
    if len(parts) > 1 and parts[0].lower() == "solve":
        q = parts[1].strip()

    try:
        var, coeffs = parse_equation(q)
        result = solve(*coeffs)
    except EquationError as e:
        return {
            "answer": messages.render_error(e),
            "steps": [messages.STEP_START.format(equation=q), str(e)],
            "kind": e.kind,
            "error": e.kind,
        }

    checked = check_solution(coeffs, result, var)
    steps = messages.explain(q, var, coeffs, result)
    if checked is not None:
        steps.append(messages.STEP_CHECK_OK if checked else messages.STEP_CHECK_FAILED)
    return {
        "answer": messages.render(result, var),
        "steps": steps,
        "kind": result.kind,
        "variable": var,
        "coefficients": coeffs,
        "result": result,
        "checked": checked,
    }
