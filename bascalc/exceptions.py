"""bascalc Exception Hierarchy.

Calculators never raise: bad input, domain violations and unknown
selections all resolve to blank outputs. The exceptions below cover the
library surface around them, i.e. looking up calculators, registering
them, loading settings and reading CLI input files.

Exception Hierarchy:
    BasCalcException (base)
    ├── RegistryException
    │   ├── CalculatorNotFoundError
    │   └── RegistrationError
    ├── UnitConversionError
    ├── ConfigurationError
    └── InputFileError

Example:
    >>> from bascalc.exceptions import CalculatorNotFoundError
    >>> raise CalculatorNotFoundError("no_such_calc", available=["valve_cv"])
"""

import json
import re
from datetime import datetime
from typing import Any, Dict, List, Optional


# ==============================================================================
# Base Exception
# ==============================================================================

class BasCalcException(Exception):
    """Base exception for all bascalc errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error identifier (e.g., "BASCALC_REGISTRATION_ERROR")
        calculator_id: Calculator involved in the error (optional)
        context: Dictionary with error-specific details
        timestamp: When the error occurred
    """

    ERROR_PREFIX = "BASCALC"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        calculator_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.calculator_id = calculator_id
        self.context = context or {}
        self.timestamp = datetime.now()

    def _generate_error_code(self) -> str:
        """Generate error code from the class name.

        Returns:
            Error code like "BASCALC_CALCULATOR_NOT_FOUND_ERROR"
        """
        error_type = re.sub(r'(?<!^)(?=[A-Z])', '_', self.__class__.__name__).upper()
        return f"{self.ERROR_PREFIX}_{error_type}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "calculator_id": self.calculator_id,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def __str__(self) -> str:
        parts = [f"[{self.error_code}]"]
        if self.calculator_id:
            parts.append(f"Calculator: {self.calculator_id}")
        parts.append(self.message)
        return " - ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"calculator_id='{self.calculator_id}')"
        )


# ==============================================================================
# Registry Exceptions
# ==============================================================================

class RegistryException(BasCalcException):
    """Base exception for calculator registry errors."""


class CalculatorNotFoundError(RegistryException):
    """No calculator is registered under the requested id.

    Example:
        >>> raise CalculatorNotFoundError(
        ...     "valve_cw",
        ...     available=["valve_cv", "pump_head"]
        ... )
    """

    def __init__(
        self,
        calculator_id: str,
        available: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = context or {}
        if available is not None:
            context["available"] = sorted(available)
        super().__init__(
            f"Unknown calculator: {calculator_id}",
            calculator_id=calculator_id,
            context=context,
        )


class RegistrationError(RegistryException):
    """A calculator definition could not be registered.

    Raised for duplicate ids and for output fields that depend on inputs
    the calculator does not declare.
    """

    def __init__(
        self,
        message: str,
        calculator_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, calculator_id=calculator_id, context=context)


# ==============================================================================
# Conversion Exceptions
# ==============================================================================

class UnitConversionError(BasCalcException):
    """Unknown unit, or units from different quantities."""


# ==============================================================================
# Configuration and I/O Exceptions
# ==============================================================================

class ConfigurationError(BasCalcException):
    """Settings could not be loaded or failed validation."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        config_key: Optional[str] = None,
    ):
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        super().__init__(message, context=context)


class InputFileError(BasCalcException):
    """An input snapshot file could not be read or parsed.

    Example:
        >>> raise InputFileError(
        ...     "Unsupported file format '.txt'",
        ...     path="inputs.txt"
        ... )
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        context: Dict[str, Any] = {}
        if path:
            context["path"] = path
        if cause:
            context["cause"] = str(cause)
            context["cause_type"] = type(cause).__name__
        super().__init__(message, context=context)


__all__ = [
    "BasCalcException",
    "RegistryException",
    "CalculatorNotFoundError",
    "RegistrationError",
    "UnitConversionError",
    "ConfigurationError",
    "InputFileError",
]
