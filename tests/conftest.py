import pytest

from calculadora.app.keyboard import handle_button
from calculadora.core.calculator import CalculatorEngine


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Pulsa una secuencia de botones: press("12", "add", "3", "equal")."""
    def _press(*buttons):
        for button in buttons:
            if button.isdigit():
                for digit in button:
                    handle_button(engine, f"num_{digit}")
            else:
                assert handle_button(engine, button), button
        return engine
    return _press
