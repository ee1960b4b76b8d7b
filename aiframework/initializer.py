"""
The `aiframework init` flow.

    1. Resolve the platform (flag, or numbered menu)
    2. List destination files that already exist and confirm overwrite
    3. Copy the shared .llm tree, then the platform tree, into the project root
    4. Print next steps

cwd, stdin and stdout are parameters; cli.py passes the real ones.
"""
import enum
import logging
import sys
from pathlib import Path
from typing import TextIO

from aiframework.installer import check_files_to_overwrite, copy_template, resolve_template
from aiframework.platform_config import (
    CLAUDE_CODE,
    PLATFORMS,
    SHARED_DEST_DIR,
    SHARED_TEMPLATE_DIR,
    Platform,
    match_choice,
)
from aiframework.prompt import prompt_user


class InitResult(enum.Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    INVALID_CHOICE = "invalid_choice"


def _select_platform(stdin: TextIO, stdout: TextIO) -> 'Platform | None':
    print("Select AI platform:", file=stdout)
    for index, platform in enumerate(PLATFORMS.values(), start=1):
        print(f"  {index}) {platform.label}", file=stdout)
    print("  [More platforms coming soon]", file=stdout)

    choice = prompt_user("Enter choice (1): ", stdin=stdin, stdout=stdout)
    return match_choice(choice)


def _confirm_overwrite(existing: list[str], stdin: TextIO, stdout: TextIO) -> bool:
    print("⚠️  The following files will be overwritten:", file=stdout)
    for path in existing:
        print(f"   {path}", file=stdout)

    answer = prompt_user(
        "Continue and overwrite these files? (y/n): ", stdin=stdin, stdout=stdout
    )
    return answer.lower().startswith("y")


def _print_next_steps(platform: Platform, stdout: TextIO) -> None:
    print("\n✅ AI Framework initialized successfully!", file=stdout)
    print("\nNext steps:", file=stdout)
    for number, (title, command) in enumerate(platform.next_steps, start=1):
        print(f"  {number}. {title}", file=stdout)
        print(f"     {command}", file=stdout)
    print("\n📖 Read .llm/README.md for complete documentation.", file=stdout)


def run_init(
    claude_code: bool = False,
    cwd: 'Path | None' = None,
    stdin: 'TextIO | None' = None,
    stdout: 'TextIO | None' = None,
    template_root: 'Path | None' = None,
    show_progress: bool = False,
) -> InitResult:
    """
    Scaffold the .llm framework and platform files into `cwd`.

    Args:
        claude_code: Select Claude Code directly, skipping the menu.
        cwd: Project root. Defaults to the process working directory.
        stdin / stdout: Streams for prompts and messages. Default to sys.*.
        template_root: Override the bundled template location (for testing).
        show_progress: Show tqdm bars while copying.

    Returns:
        InitResult.COMPLETED after copying, CANCELLED if the overwrite prompt
        was declined, INVALID_CHOICE if the menu answer matched no platform.
        Nothing is written in the last two cases.

    Raises:
        TemplateNotFoundError, OSError: logged, then re-raised.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    root = Path(cwd) if cwd is not None else Path.cwd()

    print("🚀 Initializing AI Framework...\n", file=stdout)

    if claude_code:
        platform = CLAUDE_CODE
    else:
        platform = _select_platform(stdin, stdout)
        if platform is None:
            print(
                "❌ Invalid choice. Only Claude Code is available currently.",
                file=stdout,
            )
            return InitResult.INVALID_CHOICE
    logging.debug("Platform selected: %s", platform.key)

    try:
        existing = check_files_to_overwrite(platform.key, cwd=root)
        if existing:
            if not _confirm_overwrite(existing, stdin, stdout):
                print("❌ Initialization cancelled.", file=stdout)
                return InitResult.CANCELLED

        # Both sources must exist before the first file is written.
        resolve_template(SHARED_TEMPLATE_DIR, template_root)
        resolve_template(platform.template_dir, template_root)

        print("📁 Setting up universal .llm framework...", file=stdout)
        copy_template(
            SHARED_TEMPLATE_DIR,
            SHARED_DEST_DIR,
            cwd=root,
            template_root=template_root,
            show_progress=show_progress,
        )

        print(f"🎯 Setting up {platform.key} specific files...", file=stdout)
        copy_template(
            platform.template_dir,
            ".",
            cwd=root,
            template_root=template_root,
            show_progress=show_progress,
        )
    except Exception as exc:
        logging.error("Initialization failed: %s", exc)
        raise

    _print_next_steps(platform, stdout)
    return InitResult.COMPLETED
