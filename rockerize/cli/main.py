import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import RockerizeConfig
from ..runtime import BuildOrchestrator, PipelineOutcome, PipelineState
from .args import ARG_ADD_FILES, ARG_BUILD_ONLY, ARG_EXPOSED_PORTS, ARG_HELP, ARG_VERBOSE, parse_args

HELP_TEMPLATE = """Rockerize: dockerize your rust application.

* usage: run this command in your rust application's root directory.

    $ {bin} [OPTIONS]

* available options:

{arg_help}: show this help message.

    $ {bin} {arg_help}

{arg_build_only}: do not run the image, just build it.

    $ {bin} {arg_build_only}

{arg_exposed_ports}: list port numbers that need to be exposed.

    $ {bin} {arg_exposed_ports} 22
    $ {bin} {arg_exposed_ports} 80 443 8080

{arg_add_files}: copy local files to the image.

    $ {bin} {arg_add_files} ./config.json
    $ {bin} {arg_add_files} logo.jpg index.html

{arg_verbose}: print the passed arguments and the generated dockerfile.

    $ {bin} {arg_verbose}
"""


def setup_logging(verbose: bool = False):
    """Configure console logging for rockerize."""
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )
    logging.getLogger().addHandler(console_handler)
    logging.getLogger().setLevel(logging.WARNING)

    # Set DEBUG level only for our own package
    logging.getLogger('rockerize').setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_help(program: str) -> None:
    print(
        HELP_TEMPLATE.format(
            bin=program,
            arg_help=ARG_HELP,
            arg_build_only=ARG_BUILD_ONLY,
            arg_exposed_ports=ARG_EXPOSED_PORTS,
            arg_add_files=ARG_ADD_FILES,
            arg_verbose=ARG_VERBOSE,
        )
    )


def report(outcome: PipelineOutcome) -> None:
    """Print the terminal state of a pipeline run."""
    if outcome.state is PipelineState.ABORTED:
        print(f"error: {outcome.issue}")
    elif outcome.state is PipelineState.RUN_FAILED:
        print(f"failed to run docker image: {outcome.image_name} (error: {outcome.issue})")


def run(argv: Sequence[str], config: Optional[RockerizeConfig] = None) -> PipelineOutcome:
    """
    Process command-line arguments, including the program name at ``argv[0]``.

    Args:
        argv: Full argument vector
        config: Settings to use; defaults to RockerizeConfig()

    Returns:
        PipelineOutcome describing the terminal state
    """
    program = Path(argv[0]).name if argv and argv[0] else "rockerize"
    outcome = parse_args(argv[1:])
    if outcome.show_help:
        print_help(program)
        return PipelineOutcome(state=PipelineState.HELP_PRINTED)

    request = outcome.request
    if not logging.getLogger().handlers:
        setup_logging(verbose=request.verbose)
    if request.verbose:
        print(f"* passed arguments = {list(argv[1:])}")

    orchestrator = BuildOrchestrator(config=config or RockerizeConfig())
    result = orchestrator.execute(request)
    report(result)
    return result


def main():
    """Main entry point for rockerize."""
    run(sys.argv)


if __name__ == "__main__":
    main()
