"""Controllers that sit between raw input and the services."""

from .input_controller import InputController, KeyEvent

__all__ = ["InputController", "KeyEvent"]
