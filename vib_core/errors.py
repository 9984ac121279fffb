# vib_core/errors.py


class VibrationModelError(Exception):
    """Base class for errors raised by the natural-frequency model."""
    pass


class InvalidInputError(VibrationModelError, ValueError):
    """Raised when machine data leads to a non-physical intermediate
    (negative value under a square root, bad mode orders, missing fields)."""
    pass


class RootSelectionError(VibrationModelError, RuntimeError):
    """Raised when the frame characteristic cubic has no real root."""
    pass
