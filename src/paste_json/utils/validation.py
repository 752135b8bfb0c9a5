"""Validation utilities for input documents and class forests."""

from typing import Any, List

from ..models import ClassForest
from ..types import ErrorType, ValidationError, ValidationResult


class ValidationUtils:
    """Utility class for validating input text and generated forests."""

    @staticmethod
    def validate_json_string(json_string: Any) -> ValidationResult:
        """
        Validate that the input can be handed to the JSON decoder.

        Args:
            json_string: Raw document text

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(json_string, str):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"Expected JSON text, got {type(json_string).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if json_string.startswith("\ufeff"):
            warnings.append("Input starts with a byte order mark; it will be ignored")

        return ValidationResult(is_valid=True, errors=errors, warnings=warnings)

    @staticmethod
    def validate_forest(forest: ClassForest) -> ValidationResult:
        """
        Validate a named class forest before emission.

        Checks that the root is named ``Root``, that every node is named,
        that names are unique and that every class reference resolves.
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if forest.root_id is None or forest.root_id not in forest:
            errors.append(ValidationError(
                type=ErrorType.INTERNAL,
                message="Class forest has no root node",
                location="forest"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if forest.root.declared_name != "Root":
            errors.append(ValidationError(
                type=ErrorType.INTERNAL,
                message=f"Root class is named '{forest.root.declared_name}'",
                location="Root"
            ))

        seen_names = set()
        for node in forest:
            location = node.declared_name or f"node {node.id}"
            if not node.declared_name:
                errors.append(ValidationError(
                    type=ErrorType.INTERNAL,
                    message=f"Class node {node.id} has no name",
                    location=location
                ))
            elif node.declared_name in seen_names:
                errors.append(ValidationError(
                    type=ErrorType.INTERNAL,
                    message=f"Duplicate class name '{node.declared_name}'",
                    location=location
                ))
            seen_names.add(node.declared_name)

            for class_id in node.referenced_ids():
                if class_id not in forest:
                    errors.append(ValidationError(
                        type=ErrorType.INTERNAL,
                        message=f"Reference to missing class node {class_id}",
                        location=location
                    ))

            if not node.fields:
                warnings.append(f"Class '{location}' has no fields")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
