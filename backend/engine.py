from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

import numpy as np

from backend.logging_utils import get_logger
from backend.numerals import (
    INFINITY_SYMBOL,
    MAX_INPUT_LENGTH,
    format_number,
    is_finite_numeral,
    parse_number,
)

logger = get_logger(__name__)


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    NONE = ""

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        if symbol:
            for op in cls:
                if op.value == symbol:
                    return op
        raise ValueError(f"Unknown operator: {symbol!r}")


# numpy ufuncs give IEEE results (inf/nan) where Python floats would raise
_UFUNCS = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
    Operator.POWER: np.power,
}


@dataclass
class CalculatorState:
    current_input: str = "0"
    stored_operand: float = 0.0
    operator: Operator = Operator.NONE
    previous_operator: Operator = Operator.NONE
    overwrite: bool = True


class CalculatorEngine:
    """
    Arithmetic state machine behind the keypad. Takes digits and operators one event
    at a time and reports what the display should read through on_display_changed.

    The readout is the raw numeral (no thousands separators); grouping is left to
    whoever renders it.
    """

    def __init__(self, on_display_changed: Callable[[str], None]):
        self._on_display_changed = on_display_changed
        self._state = CalculatorState()

    @property
    def state(self) -> CalculatorState:
        """A copy of the current state; changing it does not affect the engine."""
        return replace(self._state)

    @property
    def current_input(self) -> str:
        return self._state.current_input

    def _emit(self, text: str):
        self._on_display_changed(text)

    # -------------------------
    # Number entry
    # -------------------------
    def add_digit(self, digit: int):
        """Append a digit (0-9) as the least significant digit of the input."""
        if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit <= 9:
            raise ValueError(f"Digit must be an integer 0-9, got {digit!r}")
        s = self._state
        if s.overwrite or (parse_number(s.current_input) == 0 and "." not in s.current_input):
            s.overwrite = False
            s.current_input = ""

        if len(s.current_input) >= MAX_INPUT_LENGTH:
            return
        s.current_input += str(digit)
        self._emit(s.current_input)

    def add_decimal(self):
        s = self._state
        if "." in s.current_input:
            return
        # Typing "." straight after an operator or a result starts a fresh "0."
        if s.overwrite:
            s.overwrite = False
            s.current_input = "0"
        s.current_input += "."
        self._emit(s.current_input)

    def backspace(self):
        s = self._state
        s.current_input = s.current_input[:-1]
        if s.current_input in ("", "-"):
            s.current_input = "0"
        self._emit(s.current_input)

    def flip_sign(self):
        s = self._state
        if s.current_input.startswith("-"):
            s.current_input = s.current_input[1:]
        else:
            s.current_input = "-" + s.current_input
        self._emit(s.current_input)

    # -------------------------
    # Clearing
    # -------------------------
    def clear_input(self):
        """Clear the number being typed; the pending operation survives."""
        self._state.current_input = "0"
        self._emit(self._state.current_input)

    def clear(self):
        """Wipe the input and the calculator's memory."""
        s = self._state
        s.current_input = "0"
        s.stored_operand = 0.0
        s.operator = Operator.NONE
        s.previous_operator = Operator.NONE
        self._emit(s.current_input)

    # -------------------------
    # Operators
    # -------------------------
    def set_operator(self, op: Operator):
        """
        Remember op as the pending operation. If another operation is already
        pending it is solved first, so 5 + 3 * evaluates 5 + 3 before storing *.
        """
        if op is Operator.NONE:
            raise ValueError("Cannot select Operator.NONE")
        s = self._state
        if s.operator is not Operator.NONE:
            self.solve()
        s.stored_operand = parse_number(s.current_input)
        s.overwrite = True
        s.operator = op
        logger.debug("operator %s with stored operand %r", op.value, s.stored_operand)

    def solve(self):
        """
        Solve the pending operation and display the answer.

        Solving again without choosing a new operator repeats the last operation
        against its last second operand: 100 / 5 = 20, then = gives 20 / 5 = 4.
        """
        s = self._state
        value = parse_number(s.current_input)

        if s.operator is Operator.NONE:
            if s.previous_operator is Operator.NONE:
                return
            op = s.previous_operator
            a, b = value, s.stored_operand
        else:
            op = s.operator
            s.previous_operator = op
            a, b = s.stored_operand, value

        if op is Operator.DIVIDE and b == 0:
            logger.info("division by zero: %r / %r", a, b)
            s.current_input = "0"
            s.overwrite = True
            self._emit(INFINITY_SYMBOL)
            return

        with np.errstate(all="ignore"):
            result = float(_UFUNCS[op](np.float64(a), np.float64(b)))
        text = format_number(result)
        logger.debug("%r %s %r = %s", a, op.value, b, text)

        # inf and nan are shown but cannot be typed on, so the input restarts at 0
        s.current_input = text if is_finite_numeral(text) else "0"
        s.operator = Operator.NONE
        s.stored_operand = b
        s.overwrite = True
        self._emit(text)


# Quick local demo
if __name__ == "__main__":
    c = CalculatorEngine(print)
    for d in (1, 0):
        c.add_digit(d)
    c.set_operator(Operator.DIVIDE)
    c.add_digit(5)
    c.solve()  # 2
    c.solve()  # 0.4
