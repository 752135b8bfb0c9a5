"""Command-line interface for paste-json."""

import logging
import sys

import click

from . import __version__
from .generator import ClassGenerator
from .inference import DEFAULT_MAX_DEPTH
from .types import ErrorType, GenerationError, TargetLanguage

EXAMPLES = """\b
Examples:
  (1)   paste-json weather.json

  (2)   cat weather.json | paste-json --target typescript
"""


@click.command(epilog=EXAMPLES)
@click.version_option(version=__version__, prog_name="paste-json")
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-', required=False)
@click.option('--target', '-t', type=click.Choice([t.value for t in TargetLanguage]),
              default=TargetLanguage.CSHARP.value, show_default=True,
              help='Notation of the generated declarations')
@click.option('--max-depth', type=click.IntRange(min=1), default=DEFAULT_MAX_DEPTH,
              show_default=True, help='Maximum nesting depth of the document')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--profile', is_flag=True, help='Print per-stage timings to stderr')
def main(input_file, target: str, max_depth: int, verbose: bool, profile: bool):
    """Generate classes describing the JSON object in INPUT_FILE (default: stdin)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    generator = ClassGenerator(target=target, max_depth=max_depth, enable_profiling=profile)

    try:
        try:
            json_content = input_file.read()
        except UnicodeDecodeError as e:
            raise GenerationError(f"Input is not valid UTF-8: {e}", ErrorType.INPUT) from e
        result = generator.generate_from_string(json_content)
    except GenerationError as e:
        response = generator.error_handler.handle_generation_error(e)
        click.echo(f"❌ Error: {response.message}", err=True)
        click.echo(f"   {response.suggested_action}", err=True)
        sys.exit(response.exit_code)

    click.echo(result.text, nl=False)

    if profile:
        for line in generator.profiler.format_summary():
            click.echo(line, err=True)


if __name__ == '__main__':
    main()
