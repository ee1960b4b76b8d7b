"""
AI Framework CLI entry point.

Registered as a console_scripts entry point in pyproject.toml:
    aiframework = "aiframework.cli:main"

Subcommands:
    aiframework init                Pick a platform and scaffold .llm/ + agent files
    aiframework init --claude-code  Skip the menu and scaffold for Claude Code

Exit status:
    0    initialized, or overwrite declined by the user
    1    error while copying templates
    2    invalid platform choice (or argparse usage error)
    130  interrupted
"""
import argparse
import logging
import sys

from aiframework import __version__

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_CHOICE = 2
EXIT_INTERRUPTED = 130


def setup_logging(verbose: bool = False) -> None:
    """Log to stderr; stdout is reserved for the user-facing init output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aiframework",
        description="AI Framework: LLM context and agent scaffolding for your project",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every copied file to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # aiframework init
    init_parser = subparsers.add_parser(
        "init",
        help=(
            "Copy the .llm framework and platform agent files "
            "into the current directory"
        ),
    )
    init_parser.add_argument(
        "--claude-code",
        action="store_true",
        help="Set up for Claude Code without the interactive platform menu",
    )
    init_parser.set_defaults(func=_cmd_init)
    return parser


def main(argv: 'list[str] | None' = None) -> None:
    """Main entry point for the `aiframework` CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    sys.exit(args.func(args))


def _cmd_init(args: argparse.Namespace) -> int:
    """
    Run the init flow in the current working directory.

    Errors from the copy steps have only been logged by run_init(); here
    they are printed once with the re-run hint and a non-zero exit.
    """
    from aiframework.initializer import InitResult, run_init

    claude_code = getattr(args, "claude_code", False)

    try:
        result = run_init(claude_code=claude_code, show_progress=sys.stderr.isatty())
    except KeyboardInterrupt:
        print("\n❌ Initialization interrupted.")
        return EXIT_INTERRUPTED
    except Exception as exc:
        print(f"\nERROR during initialization: {exc}")
        print("Fix the error and re-run `aiframework init`.")
        return EXIT_ERROR

    if result is InitResult.INVALID_CHOICE:
        return EXIT_INVALID_CHOICE
    return EXIT_OK


if __name__ == "__main__":
    main()
