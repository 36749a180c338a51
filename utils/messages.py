# utils/messages.py
# Single source of the wording shown to users by APP.py and the CLI.

ENTER_EQUATION = "Enter a valid equation."

NO_VARIABLE = "No variable found in the equation."
MALFORMED = "The equation is not valid: {reason}"

INFINITE_SOLUTIONS = "The equation has infinitely many solutions."
NO_SOLUTION = "The equation has no solution."
LINEAR_SOLUTION = "Solution: {var} = {x}"
ONE_REAL_SOLUTION = "One real solution: {var} = {x}"
TWO_REAL_SOLUTIONS = "Two real solutions: {var}1 = {x1}, {var}2 = {x2}"
TWO_COMPLEX_SOLUTIONS = (
    "Two complex solutions: {var}1 = {real} + {imag}i, {var}2 = {real} - {imag}i"
)

STEP_START = "Step 1: Start with the equation: {equation}"
STEP_VARIABLE = "Step 2: Identify the unknown: {var}"
STEP_CANONICAL = "Step 3: Move every term to the left side: {polynomial} = 0"
STEP_DEGENERATE = "Step 4: The {var} terms cancel, leaving {c} = 0"
STEP_DEGENERATE_INFINITE = "Both sides are always equal → infinitely many solutions."
STEP_DEGENERATE_NONE = "The constants differ → no solution."
STEP_LINEAR = "Step 4: Divide by the coefficient of {var}: {var} = -({c}) / {b} = {x}"
STEP_DELTA = "Step 4: Compute delta = b² - 4ac = ({b})² - 4·({a})·({c}) = {delta}"
STEP_DOUBLE_ROOT = "Step 5: delta = 0 → {var} = -b / 2a = {x}"
STEP_TWO_ROOTS = "Step 5: delta > 0 → {var}1,2 = (-b ± √delta) / 2a"
STEP_COMPLEX_ROOTS = "Step 5: delta < 0 → {var}1,2 = -b / 2a ± i·√(-delta) / 2a"
STEP_CHECK_OK = "Check: substituting the roots back gives 0 ✓"
STEP_CHECK_FAILED = "Check: substituting the roots back does not give 0 (rounding error?)"


def format_number(value) -> str:
    """Integral floats print without '.0', everything else as the shortest round-trip repr."""
    value = float(value) + 0.0
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_polynomial(coefficients, var: str) -> str:
    terms = []
    for coef, power in zip(coefficients, (f"{var}²", var, "")):
        if coef == 0:
            continue
        sign = "-" if coef < 0 else "+"
        mag = abs(coef)
        body = format_number(mag) if (mag != 1 or not power) else ""
        terms.append((sign, body + power))
    if not terms:
        return "0"
    first_sign, first = terms[0]
    out = ("-" if first_sign == "-" else "") + first
    for sign, term in terms[1:]:
        out += f" {sign} {term}"
    return out


def render(result, var: str = "x") -> str:
    kind = result.kind
    if kind == "infinite_solutions":
        return INFINITE_SOLUTIONS
    if kind == "no_solution":
        return NO_SOLUTION
    if kind == "one_real_root":
        template = LINEAR_SOLUTION if result.degree == 1 else ONE_REAL_SOLUTION
        return template.format(var=var, x=format_number(result.x))
    if kind == "two_real_roots":
        return TWO_REAL_SOLUTIONS.format(
            var=var, x1=format_number(result.x1), x2=format_number(result.x2))
    if kind == "two_complex_roots":
        return TWO_COMPLEX_SOLUTIONS.format(
            var=var, real=format_number(result.real), imag=format_number(result.imag))
    raise ValueError(f"Unknown result kind: {kind}")


def render_error(error) -> str:
    if error.kind == "no_variable":
        return NO_VARIABLE
    return MALFORMED.format(reason=error)


def explain(equation: str, var: str, coefficients, result) -> list:
    a, b, c = coefficients
    steps = [
        STEP_START.format(equation=equation),
        STEP_VARIABLE.format(var=var),
        STEP_CANONICAL.format(polynomial=format_polynomial(coefficients, var)),
    ]
    kind = result.kind
    if kind in ("infinite_solutions", "no_solution"):
        steps.append(STEP_DEGENERATE.format(var=var, c=format_number(c)))
        steps.append(STEP_DEGENERATE_INFINITE if kind == "infinite_solutions" else STEP_DEGENERATE_NONE)
    elif kind == "one_real_root" and result.degree == 1:
        steps.append(STEP_LINEAR.format(
            var=var, c=format_number(c), b=format_number(b), x=format_number(result.x)))
    else:
        delta = b * b - 4 * a * c
        steps.append(STEP_DELTA.format(
            a=format_number(a), b=format_number(b), c=format_number(c), delta=format_number(delta)))
        if kind == "one_real_root":
            steps.append(STEP_DOUBLE_ROOT.format(var=var, x=format_number(result.x)))
        elif kind == "two_real_roots":
            steps.append(STEP_TWO_ROOTS.format(var=var))
        else:
            steps.append(STEP_COMPLEX_ROOTS.format(var=var))
    steps.append(render(result, var))
    return steps
