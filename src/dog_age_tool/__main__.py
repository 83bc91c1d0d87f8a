"""Punto de entrada de la app Kivy."""

from __future__ import annotations

from dog_age_tool.app import run_app
from dog_age_tool.config import load_settings


def main() -> int:
    """Run app entrypoint."""
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Configuracion invalida: {exc}")
        return 2
    try:
        return run_app(settings)
    except ImportError as exc:
        print(f"No se pudo iniciar Kivy: {exc}")
        print("Instala dependencias de GUI: pip install 'dog-age-tool[gui]'")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
