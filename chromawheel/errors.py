from typing import Any


class InvalidColorShape(TypeError):
    """Raised when a value is neither an RGBA nor an HSLA color."""

    def __init__(self, value: Any, reason: str = "matches neither the RGBA nor the HSLA shape"):
        self.value = value
        self.reason = reason
        super().__init__(f"Unsupported color structure {value!r}: {reason}")
