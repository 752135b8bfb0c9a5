"""Core type definitions for paste-json."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ClassForest, FieldType


class PrimitiveKind(Enum):
    """Enumeration of scalar field kinds."""
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


class TargetLanguage(Enum):
    """Enumeration of supported output notations."""
    CSHARP = "csharp"
    TYPESCRIPT = "typescript"
    PYTHON = "python"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    UNSUPPORTED_ROOT = "unsupported_root"
    STRUCTURE = "structure"
    DEPTH = "depth"
    INPUT = "input"
    INTERNAL = "internal"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input or forest validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    exit_code: int
    message: str
    suggested_action: str


@dataclass
class GenerationResult:
    """Result of a class generation run."""
    declarations: List[str]
    forest: 'ClassForest'
    target: TargetLanguage
    stage_timings: Dict[str, float] = field(default_factory=dict)
    preamble: Optional[str] = None

    @property
    def class_count(self) -> int:
        return len(self.declarations)

    @property
    def text(self) -> str:
        """The preamble, if any, and all declarations separated by a blank line."""
        blocks = ([self.preamble] if self.preamble else []) + self.declarations
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"


class GenerationError(Exception):
    """Base exception for failures of the generation pipeline."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class JsonParseError(GenerationError):
    """The input text is not valid JSON."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.SYNTAX, context)


class UnsupportedRootError(GenerationError):
    """The top-level JSON value is not an object."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.UNSUPPORTED_ROOT, context)


class UnsupportedValueError(GenerationError):
    """A value in the tree is not a JSON value."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.STRUCTURE, context)


class StackDepthExceededError(GenerationError):
    """The document nests deeper than the configured limit."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.DEPTH, context)


# Abstract base classes for interfaces

class ForestStageInterface(ABC):
    """Abstract interface for a stage that rewrites a class forest."""

    @abstractmethod
    def run(self, forest: 'ClassForest') -> 'ClassForest':
        """Transform the forest and return it."""
        pass


class EmitterInterface(ABC):
    """Abstract interface for declaration emitters."""

    @abstractmethod
    def emit(self, forest: 'ClassForest') -> List[str]:
        """Render every class node of the forest as declaration text."""
        pass

    @abstractmethod
    def render_type(self, field_type: 'FieldType', forest: 'ClassForest') -> str:
        """Render a single field type."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_generation_error(self, error: GenerationError) -> ErrorResponse:
        """Handle pipeline errors."""
        pass
