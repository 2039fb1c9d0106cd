"""
Punto de entrada de la calculadora.

Ejecución:
    calculadora
    calculadora --width 480 --height 720
    python -m calculadora.main
"""

import sys

import click

from .app.calculator_app import CalculatorApp
from .config.display import DisplayConfig


@click.command()
@click.option("--width", default=400, show_default=True, type=click.IntRange(240, 2000),
              help="Ancho de la ventana en pixeles")
@click.option("--height", default=600, show_default=True, type=click.IntRange(360, 2000),
              help="Alto de la ventana en pixeles")
def main(width, height):
    """Calculadora basica con teclado en pantalla y soporte de teclado."""
    config = DisplayConfig(width=width, height=height)
    try:
        # Crear instancia de la aplicación y ejecutar bucle principal
        app = CalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        # Usuario presionó Ctrl+C
        print("\nInterrumpido por el usuario")
    except RuntimeError as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
