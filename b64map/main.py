from collections.abc import Sequence
from typing import BinaryIO

import click
from pydantic import ValidationError

from b64map.codec.base64_codec import Base64LineCodec
from b64map.config.settings import Settings
from b64map.exit_codes import ExitCode
from b64map.framer.exceptions import FramerError
from b64map.framer.reader import DocumentReader
from b64map.logging.logger import Log
from b64map.transformer.exceptions import TransformError
from b64map.transformer.factory import ProcessRunnerFactory
from b64map.transformer.transformer import Transformer
from b64map.worker.worker import Worker

EPILOG = """\b
Runs PROGRAM as a filter on the input. Standard input and output are base64
encoded, one document or record per line. PROGRAM is run once per line with
the decoded document on its standard input, and its standard output is
re-encoded as one output line.

\b
Example:

\b
    $ < test b64map cat > test.cat
    2020-02-24 12:15:29,114 worker.py:39 [INFO] processed 2 documents in 0:00:00.004211
    $ diff test test.cat
    $
"""


def build_worker(
    settings: Settings,
    command: Sequence[str],
    destination: BinaryIO,
    diagnostics: BinaryIO,
) -> Worker:
    """Build a Worker with the codec, reader and transformer it needs."""
    codec = Base64LineCodec()
    reader = DocumentReader(codec, settings)
    runner = ProcessRunnerFactory.create(settings)
    transformer = Transformer(
        command,
        runner=runner,
        codec=codec,
        destination=destination,
        diagnostics=diagnostics,
        settings=settings,
    )
    return Worker(reader, transformer, settings)


def load_settings(**overrides: object) -> Settings:
    """Merge CLI overrides over environment configuration."""
    given = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**given)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise click.UsageError(f"invalid configuration: {exc}") from exc


@click.command(
    epilog=EPILOG,
    context_settings={"allow_interspersed_args": False},
)
@click.option("-d", "--debug", is_flag=True, help="Debugging output.")
@click.option(
    "-p",
    "--progress",
    "progress_every",
    type=click.IntRange(min=0),
    default=None,
    metavar="N",
    help="Report progress every N documents, 0 disables.  [default: 100]",
)
@click.option(
    "--strategy",
    "io_strategy",
    type=click.Choice(list(ProcessRunnerFactory.ADAPTERS), case_sensitive=False),
    default=None,
    help="How the program's pipes are driven.  [default: sequential]",
)
@click.option("--crlf", is_flag=True, help="Terminate output lines with CRLF.")
@click.argument("program")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(
    ctx: click.Context,
    debug: bool,
    progress_every: int | None,
    io_strategy: str | None,
    crlf: bool,
    program: str,
    args: tuple[str, ...],
) -> None:
    """Apply PROGRAM to every base64 encoded line of standard input."""
    settings = load_settings(
        debug=True if debug else None,
        progress_every=progress_every,
        io_strategy=io_strategy,
        line_ending="crlf" if crlf else None,
    )
    Log.configure(settings.effective_log_level)

    try:
        worker = build_worker(
            settings,
            [program, *args],
            destination=click.get_binary_stream("stdout"),
            diagnostics=click.get_binary_stream("stderr"),
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        worker.run(click.get_binary_stream("stdin"))
    except (FramerError, TransformError) as exc:
        Log.error(f"fatal: {exc}")
        ctx.exit(ExitCode.FAILURE)


if __name__ == "__main__":
    main()
