# core/verify.py
import cmath

import sympy as sp

TOLERANCE = 1e-6


def _roots(result):
    if result.kind == "one_real_root":
        return [complex(result.x)]
    if result.kind == "two_real_roots":
        return [complex(result.x1), complex(result.x2)]
    if result.kind == "two_complex_roots":
        return [complex(result.real, result.imag), complex(result.real, -result.imag)]
    return []


def check_solution(coefficients, result, variable: str = "x"):
    """
    Substitute every root of `result` back into a*v^2 + b*v + c.

    Returns True when all residuals vanish (relative to the size of the
    terms), False otherwise, and None for results that carry no roots.
    A root or residual that is not finite never checks out.
    """
    roots = _roots(result)
    if not roots:
        return None
    if not all(cmath.isfinite(r) for r in roots):
        return False
    a, b, c = coefficients
    v = sp.Symbol(variable)
    poly = sp.Float(a) * v**2 + sp.Float(b) * v + sp.Float(c)
    for r in roots:
        residual = complex(sp.N(poly.subs(v, sp.Float(r.real) + sp.Float(r.imag) * sp.I)))
        size = abs(r)
        scale = max(1.0, abs(a) * size**2 + abs(b) * size + abs(c))
        if not cmath.isfinite(residual) or abs(residual) > TOLERANCE * scale:
            return False
    return True
