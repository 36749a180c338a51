# core/errors.py

class EquationError(ValueError):
    """Base class for equations the solver cannot work with."""
    kind = "equation_error"


class NoVariableError(EquationError):
    kind = "no_variable"

    def __init__(self, message: str = "No variable found in the equation."):
        super().__init__(message)


class MalformedEquationError(EquationError):
    kind = "malformed_equation"
