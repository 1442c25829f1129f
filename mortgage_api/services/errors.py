# This project was developed with assistance from AI tools.
"""Typed failures raised by the calculation core.

Each class is one failure kind. The HTTP layer maps every ``MortgageError``
to the ``{"result": "fail", "message": ...}`` envelope; the message is the
exception's string form.
"""


class MortgageError(ValueError):
    """Base class for every calculation or validation failure."""

    default_message = "Error: invalid request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidInputType(MortgageError):
    """A parameter is missing or has the wrong shape."""

    default_message = "Error: wrong input types"


class NotANumber(MortgageError):
    """A numeric parameter could not be parsed."""

    default_message = "Error: inputs must be numbers"


class UnknownSchedule(MortgageError):
    """Payment schedule label is not weekly, biweekly or monthly."""

    default_message = "Error: paymentSchedule must be 'weekly', 'biweekly', or 'monthly'"


class DownPaymentTooLow(MortgageError):
    default_message = "Error: Down Payment Is Too Low"


class AmortizationOutOfRange(MortgageError):
    default_message = "Error: the mortgage must be paid off between 5 to 25 years"


class InvalidRate(MortgageError):
    """Interest rate is not a positive number, or the update body is unparsable."""

    default_message = "Error: interest rate must be greater than 0"


class DegenerateSchedule(MortgageError):
    """The amortization formula would divide by zero."""

    default_message = "Error: payment schedule produces a degenerate amortization"


class InvalidAmount(MortgageError):
    """A currency amount is outside its allowed range."""

    default_message = "Error: amounts must be positive"
