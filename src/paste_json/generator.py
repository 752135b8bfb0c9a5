"""Class generator: the parse, build, deduplicate, name and emit pipeline."""

import logging
from typing import Any, Optional, Union

from .emitters import get_emitter
from .error_handler import ErrorHandler
from .inference import DEFAULT_MAX_DEPTH, Deduplicator, Namer, SchemaBuilder
from .parser import JSONParser
from .profiler import PerformanceProfiler
from .types import GenerationResult, StackDepthExceededError, TargetLanguage
from .utils.validation import ValidationUtils


class ClassGenerator:
    """
    Infers class declarations from a JSON document.

    Each run is a single linear pass: build the candidate forest, collapse
    identical shapes, name the survivors and render them. A failure in
    any stage aborts the run without partial output.
    """

    def __init__(self, target: Union[TargetLanguage, str] = TargetLanguage.CSHARP,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 enable_profiling: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the class generator.

        Args:
            target: Output notation, as a TargetLanguage or its name
            max_depth: Maximum nesting depth accepted in documents
            enable_profiling: Record per-stage duration and memory
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.emitter = get_emitter(target, self.logger)
        self.target = TargetLanguage(target.lower()) if isinstance(target, str) else target
        self.max_depth = max_depth

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.builder = SchemaBuilder(max_depth=max_depth, logger=self.logger)
        self.deduplicator = Deduplicator(self.logger)
        self.namer = Namer(self.logger, reserved_names=self.emitter.RESERVED_CLASS_NAMES)
        self.profiler = PerformanceProfiler(enabled=enable_profiling, logger=self.logger)

    def generate_from_string(self, json_string: str) -> GenerationResult:
        """
        Parse JSON text and generate its class declarations.

        Raises:
            JsonParseError: If the text is not valid JSON
            UnsupportedRootError: If the document is not an object
            StackDepthExceededError: If the document nests too deeply
        """
        input_size = len(json_string) if isinstance(json_string, str) else 0
        with self.profiler.profile_stage("parse", input_size):
            value = self.parser.parse(json_string)
        return self.generate(value)

    def generate(self, value: Any) -> GenerationResult:
        """
        Generate class declarations for a decoded JSON document.

        Args:
            value: Decoded JSON value; must be an object

        Returns:
            GenerationResult with the declarations in emission order
        """
        self.logger.info(f"Generating {self.target.value} classes")

        with self.profiler.profile_stage("build"):
            try:
                forest = self.builder.build(value)
            except RecursionError as e:
                raise StackDepthExceededError(
                    f"Document nesting exhausted the interpreter stack "
                    f"(max_depth={self.max_depth})"
                ) from e

        with self.profiler.profile_stage("deduplicate", len(forest)):
            forest = self.deduplicator.run(forest)

        with self.profiler.profile_stage("name", len(forest)):
            forest = self.namer.run(forest)
            self.error_handler.check_forest(ValidationUtils.validate_forest(forest))

        with self.profiler.profile_stage("emit", len(forest)):
            declarations = self.emitter.emit(forest)

        self.logger.info(f"Generated {len(declarations)} classes")
        return GenerationResult(
            declarations=declarations,
            forest=forest,
            target=self.target,
            stage_timings=self.profiler.stage_timings(),
            preamble=self.emitter.preamble()
        )
