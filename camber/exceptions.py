"""
Camber Custom Exceptions

Provides specific exception classes for the outer layers of Camber:
configuration, easing lookup, sampling and visualization. The numeric core
(polynomials, easing functions, ranges) is total and never raises these.
"""

import math
import operator


class CamberError(Exception):
    """Base exception class for all Camber errors"""

    def __init__(self, message: str, error_code: str = "CB_GENERAL"):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(CamberError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, config_key: str = None,
                 config_value: str = None):
        self.config_key = config_key
        self.config_value = config_value

        full_message = f"Configuration error: {message}"

        if config_key:
            full_message += f" (key: {config_key}"
            if config_value:
                full_message += f", value: {config_value}"
            full_message += ")"

        super().__init__(full_message, "CB_CONFIG")


class EasingNotFoundError(CamberError, KeyError):
    """Raised when an easing function name is not registered"""

    def __init__(self, name: str, available: list = None):
        self.name = name
        self.available = available or []

        full_message = f"Unknown easing function '{name}'"
        if self.available:
            full_message += f" (try one of: {', '.join(self.available[:4])}, ...)"

        super().__init__(full_message, "CB_EASING")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return CamberError.__str__(self)


class SamplingError(CamberError):
    """Raised when a curve cannot be sampled"""

    def __init__(self, message: str, label: str = None, original_error: Exception = None):
        self.label = label
        self.original_error = original_error

        if label:
            full_message = f"Sampling failed for '{label}': {message}"
        else:
            full_message = f"Sampling failed: {message}"

        if original_error:
            full_message += f" (caused by: {type(original_error).__name__}: {original_error})"

        super().__init__(full_message, "CB_SAMPLING")


class VisualizationError(CamberError):
    """Raised when visualization operations fail"""

    def __init__(self, message: str, plot_type: str = None):
        self.plot_type = plot_type

        if plot_type:
            full_message = f"Visualization failed ({plot_type}): {message}"
        else:
            full_message = f"Visualization failed: {message}"

        super().__init__(full_message, "CB_VISUALIZATION")


class DependencyError(CamberError):
    """Raised when optional dependencies are missing"""

    def __init__(self, message: str, missing_package: str = None,
                 required_version: str = None):
        self.missing_package = missing_package
        self.required_version = required_version

        full_message = f"Dependency error: {message}"

        if missing_package:
            full_message += f" (missing: {missing_package}"
            if required_version:
                full_message += f">={required_version}"
            full_message += ")"

        super().__init__(full_message, "CB_DEPENDENCY")

# Helper functions for validating user input at the API/CLI boundary

def validate_numel(numel, minimum: int = 0, config_key: str = "numel"):
    """Validate an element count parameter"""
    try:
        if isinstance(numel, bool):
            raise TypeError
        numel = operator.index(numel)
    except TypeError:
        raise ConfigurationError(
            f"Element count must be an integer, got {type(numel).__name__}",
            config_key=config_key
        ) from None

    if numel < minimum:
        raise ConfigurationError(
            f"Element count must be >= {minimum}, got {numel}",
            config_key=config_key,
            config_value=str(numel)
        )


def validate_coefficients(coefficients):
    """Validate polynomial coefficients coming from user input"""
    try:
        values = [float(c) for c in coefficients]
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Coefficients must be numbers: {e}",
            config_key="coefficients"
        )

    if any(math.isnan(v) for v in values):
        raise ConfigurationError(
            "Coefficients contain NaN values",
            config_key="coefficients"
        )

    return values

# Context managers for error handling

class ErrorContext:
    """Context manager wrapping unexpected exceptions into Camber exceptions"""

    def __init__(self, operation_name: str, label: str = None):
        self.operation_name = operation_name
        self.label = label

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            return False

        if isinstance(exc_value, CamberError):
            return False  # Re-raise Camber exceptions as-is

        if not issubclass(exc_type, Exception):
            return False  # KeyboardInterrupt and friends propagate

        if self.label:
            raise SamplingError(
                f"Error in {self.operation_name}",
                label=self.label,
                original_error=exc_value
            ) from exc_value
        else:
            raise CamberError(
                f"Error in {self.operation_name}: {exc_value}",
                error_code="CB_UNEXPECTED"
            ) from exc_value

# Export commonly used exceptions for easy import
__all__ = [
    'CamberError',
    'ConfigurationError',
    'EasingNotFoundError',
    'SamplingError',
    'VisualizationError',
    'DependencyError',
    'ErrorContext',
    'validate_numel',
    'validate_coefficients',
]
