import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import get_settings
from .engine import resolve
from .errors import PtrLensError
from .input import InputType, STDIN, read_all
from .models import AddressList
from .output import ConsoleOutput, JsonExporter
from .resolver import ResType, res_init


console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool, debug: bool):
    """Route library logging through rich, on stderr"""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=debug)],
        force=True,
    )


def resolver_options(kind: ResType, settings) -> dict:
    """Constructor options taken from the settings for each resolver kind"""
    if kind == ResType.DNS:
        return {'timeout': settings.timeout}
    if kind == ResType.LATENT:
        return {'delay': settings.latency}
    return {}


@click.command()
@click.argument('files', nargs=-1, type=click.Path(allow_dash=True))
@click.option('-j', '--jobs', type=int, default=None,
              help='Parallel jobs for resolving (default: number of cores)')
@click.option('-r', '--resolver', 'resolver_name', default=None,
              type=click.Choice([t.value for t in ResType], case_sensitive=False),
              help='Resolver to use (default: live)')
@click.option('-N', '--no-resolve', is_flag=True,
              help='Do not resolve, use the address as name')
@click.option('--async', 'use_async', is_flag=True,
              help='Run workers as asyncio tasks instead of threads')
@click.option('-t', '--input-type', 'itype', default=None,
              type=click.Choice([t.value for t in InputType], case_sensitive=False),
              help='Input format (default: guessed from extension)')
@click.option('--json', 'json_path', type=click.Path(),
              help='Export results to JSON file')
@click.option('-v', '--verbose', is_flag=True, help='Verbose mode')
@click.option('-D', '--debug', is_flag=True, help='Debug mode')
@click.version_option(version=__version__)
def main(files: tuple[str, ...], jobs: Optional[int], resolver_name: Optional[str],
         no_resolve: bool, use_async: bool, itype: Optional[str],
         json_path: Optional[str], verbose: bool, debug: bool):
    """
    PtrLens - Concurrent reverse DNS resolution.

    Resolve every IP address found in FILES (one per line, plain, .gz or
    .zip; '-' or nothing for stdin) to its PTR name.

    Examples:

        ptrlens addresses.txt

        ptrlens -j 4 --async addresses.txt.gz

        cat addresses.txt | ptrlens -r dns --json out.json
    """
    setup_logging(verbose, debug)

    settings = get_settings()
    output = ConsoleOutput(console)

    njobs = jobs if jobs is not None else min(settings.jobs, settings.max_threads)
    backend = 'asyncio' if use_async else 'thread'

    try:
        if no_resolve:
            kind = ResType.NULL
        else:
            kind = ResType((resolver_name or settings.resolver).lower())

        input_type = InputType(itype) if itype else None
        addresses = read_all(files or (STDIN,), input_type)
        ipl = AddressList.from_strings(addresses)

        solver = res_init(kind, **resolver_options(kind, settings))

        output.print_header(len(ipl), kind.value, njobs, backend)

        start = time.perf_counter()
        result = resolve(ipl, njobs, solver,
                         max_threads=settings.max_threads, backend=backend)
        elapsed = time.perf_counter() - start

        output.print_results(result)
        output.print_summary(result, elapsed)

        if json_path:
            exporter = JsonExporter(kind.value, njobs, backend)
            json_file = Path(json_path)
            exporter.export(result, json_file)
            console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")

    except (PtrLensError, ValueError, OSError) as e:
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)


if __name__ == '__main__':
    main()
