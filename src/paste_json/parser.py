"""JSON parser producing the value tree consumed by the schema builder."""

import json
import logging
from typing import Any, Optional

from .error_handler import ErrorHandler
from .types import ErrorType, GenerationError, JsonParseError, StackDepthExceededError


def _reject_constant(name: str) -> None:
    # NaN, Infinity and -Infinity are accepted by the json module but are not JSON
    raise JsonParseError(f"JSON parsing failed: {name} is not a valid JSON value",
                         context={"constant": name})


class JSONParser:
    """
    Parses JSON text into Python values.

    Objects decode to insertion-ordered ``dict`` instances, so key order
    follows the document. Numbers without a fraction or exponent decode to
    ``int`` and all others to ``float``.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON document.

        Args:
            json_string: JSON text to parse

        Returns:
            The decoded value tree

        Raises:
            JsonParseError: If the text is empty or not valid JSON
            StackDepthExceededError: If the decoder runs out of stack
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            message = f"Invalid JSON input: {'; '.join(error_messages)}"
            error_type = validation_result.errors[0].type
            if error_type == ErrorType.SYNTAX:
                raise JsonParseError(message)
            raise GenerationError(message, error_type)
        for warning in validation_result.warnings:
            self.logger.warning(warning)

        try:
            data = json.loads(json_string.lstrip("\ufeff"), parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise JsonParseError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                context={"line": e.lineno, "column": e.colno}
            ) from e
        except RecursionError as e:
            raise StackDepthExceededError(
                "JSON document is nested too deeply to decode"
            ) from e

        self.logger.info(f"Parsed JSON document of {len(json_string)} characters")
        return data
