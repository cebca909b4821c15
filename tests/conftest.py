import pytest

from backend.engine import CalculatorEngine


class Readout:
    """Records every string the engine sends to the display."""

    def __init__(self):
        self.history = []

    def __call__(self, text):
        self.history.append(text)

    @property
    def last(self):
        return self.history[-1] if self.history else None


@pytest.fixture
def readout():
    return Readout()


@pytest.fixture
def engine(readout):
    return CalculatorEngine(readout)


@pytest.fixture
def type_number(engine):
    """Type a numeral the way a user would, e.g. "-12.5"."""

    def _type(text):
        negative = text.startswith("-")
        for ch in text.lstrip("-"):
            if ch == ".":
                engine.add_decimal()
            else:
                engine.add_digit(int(ch))
        if negative:
            engine.flip_sign()

    return _type
