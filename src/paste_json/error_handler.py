"""Error handling implementation for paste-json."""

import logging
from typing import Optional

from .types import (
    ErrorHandlerInterface,
    ErrorResponse,
    ErrorType,
    GenerationError,
    ValidationError,
    ValidationResult,
)
from .utils.validation import ValidationUtils

# sysexits.h codes
EXIT_CODES = {
    ErrorType.SYNTAX: 65,
    ErrorType.UNSUPPORTED_ROOT: 66,
    ErrorType.STRUCTURE: 67,
    ErrorType.DEPTH: 68,
    ErrorType.INTERNAL: 70,
    ErrorType.INPUT: 74,
}


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for generation runs.

    Validates raw input and translates pipeline failures into the exit
    code and advice reported by the command-line interface.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON text.

        Args:
            input_data: JSON text to validate

        Returns:
            ValidationResult with validation details
        """
        return ValidationUtils.validate_json_string(input_data)

    def handle_generation_error(self, error: GenerationError) -> ErrorResponse:
        """
        Map a pipeline error to an exit code and a suggested action.

        Args:
            error: GenerationError to handle

        Returns:
            ErrorResponse for the caller to report
        """
        self.logger.error(f"Generation error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            action = "Fix the JSON syntax at the reported position and retry."
        elif error.error_type == ErrorType.UNSUPPORTED_ROOT:
            action = ("Wrap the document in an object, e.g. {\"items\": [...]}, "
                      "so the top-level class has fields to describe.")
        elif error.error_type == ErrorType.DEPTH:
            action = "Reduce the nesting of the document or raise --max-depth."
        elif error.error_type == ErrorType.STRUCTURE:
            action = "Pass only values produced by a JSON decoder."
        elif error.error_type == ErrorType.INPUT:
            action = "Check that the input exists and is UTF-8 encoded JSON."
        else:
            action = "This is a bug; please report it with the input document."

        return ErrorResponse(
            exit_code=EXIT_CODES.get(error.error_type, EXIT_CODES[ErrorType.INTERNAL]),
            message=str(error),
            suggested_action=action
        )

    def check_forest(self, validation_result: ValidationResult) -> None:
        """
        Raise for an invalid forest and log its warnings.

        Raises:
            GenerationError: With ErrorType.INTERNAL if validation failed
        """
        for warning in validation_result.warnings:
            self.logger.debug(warning)
        if not validation_result.is_valid:
            messages = "; ".join(self._describe(error) for error in validation_result.errors)
            raise GenerationError(
                f"Generated classes are inconsistent: {messages}",
                ErrorType.INTERNAL,
                context=validation_result.errors
            )

    @staticmethod
    def _describe(error: ValidationError) -> str:
        if error.location:
            return f"{error.message} ({error.location})"
        return error.message
