"""
Keyboard and keypad wiring for the calculator window.

Both the on-screen buttons and the keyboard end up calling the same engine
methods; this module holds that mapping so the window code only has to build
widgets.
"""
from typing import Callable, Dict, List

from backend.engine import CalculatorEngine, Operator

# Button grid, top to bottom, left to right
KEYPAD: List[List[str]] = [
    ["CE", "C", "⌫", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["±", "0", ".", "="],
]

# Operator buttons; power has no button and is reachable from the keyboard only
_BUTTON_OPERATORS: Dict[str, Operator] = {
    "÷": Operator.DIVIDE,
    "×": Operator.MULTIPLY,
    "-": Operator.SUBTRACT,
    "+": Operator.ADD,
}

SOLVE_KEYSYMS = ("Return", "KP_Enter")
CLEAR_KEYSYMS = ("Delete",)
BACKSPACE_KEYSYMS = ("BackSpace",)


def button_action(engine: CalculatorEngine, label: str) -> Callable[[], None]:
    """Return the callable for a keypad button label."""
    if label.isdigit():
        return lambda d=int(label): engine.add_digit(d)
    if label in _BUTTON_OPERATORS:
        return lambda op=_BUTTON_OPERATORS[label]: engine.set_operator(op)
    if label == "CE":
        return engine.clear_input
    if label == "C":
        return engine.clear
    if label == "⌫":
        return engine.backspace
    if label == "±":
        return engine.flip_sign
    if label == ".":
        return engine.add_decimal
    if label == "=":
        return engine.solve
    raise ValueError(f"Unknown keypad label: {label!r}")


def handle_key(engine: CalculatorEngine, char: str, keysym: str) -> bool:
    """
    Forward a key press to the engine.

    char is the typed character (may be empty for special keys), keysym the Tk key
    name. Returns True if the key meant something to the calculator.
    """
    if keysym in SOLVE_KEYSYMS:
        engine.solve()
    elif keysym in CLEAR_KEYSYMS:
        engine.clear()
    elif keysym in BACKSPACE_KEYSYMS:
        engine.backspace()
    elif len(char) == 1 and char.isdigit() and char.isascii():
        engine.add_digit(int(char))
    elif char == ".":
        engine.add_decimal()
    elif char == "=":
        engine.solve()
    elif char and char in "+-*/^":
        engine.set_operator(Operator.from_symbol(char))
    else:
        return False
    return True
