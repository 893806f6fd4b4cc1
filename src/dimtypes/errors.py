from __future__ import annotations

E_UNINVERTIBLE_MODULUS = "E_UNINVERTIBLE_MODULUS"
E_UNIT_MISMATCH = "E_UNIT_MISMATCH"
E_UNIFICATION_FAILED = "E_UNIFICATION_FAILED"
E_DECODE_EXHAUSTED = "E_DECODE_EXHAUSTED"
E_DIMENSION_MISMATCH = "E_DIMENSION_MISMATCH"
E_INVALID_DIMENSION = "E_INVALID_DIMENSION"
E_INVALID_FRACTION = "E_INVALID_FRACTION"


class EncodingError(RuntimeError):
    """Base class for programmer errors detected by the encoding engine.

    None of these are retryable: they signal an invalid combination of
    dimensions or units, or an exponent outside the representable range.
    """

    code = "E_ENCODING"

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.path:
            return f"{self.code}: {self.message} ({self.path})"
        return f"{self.code}: {self.message}"


class UninvertibleModulus(EncodingError):
    code = E_UNINVERTIBLE_MODULUS


class UnitMismatch(EncodingError):
    code = E_UNIT_MISMATCH


class UnificationFailure(EncodingError):
    code = E_UNIFICATION_FAILED


class DecodeExhausted(EncodingError):
    code = E_DECODE_EXHAUSTED


class DimensionMismatch(EncodingError):
    code = E_DIMENSION_MISMATCH


class InvalidDimension(EncodingError):
    code = E_INVALID_DIMENSION


class InvalidFraction(EncodingError):
    code = E_INVALID_FRACTION


__all__ = [
    "DecodeExhausted",
    "DimensionMismatch",
    "EncodingError",
    "InvalidDimension",
    "InvalidFraction",
    "UnificationFailure",
    "UninvertibleModulus",
    "UnitMismatch",
]
