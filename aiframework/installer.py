"""
AI Framework installer module.

Provides:
  - check_files_to_overwrite(): Which destination files already exist for a platform
  - copy_template(): Copy a bundled template tree into the project
  - copy_directory(): Recursive byte-for-byte directory copy

Bundled templates live next to this file:
  aiframework/templates/.llm/                 shared .llm framework
  aiframework/platforms/<platform>/templates/ platform-specific files

Called by: aiframework.initializer.run_init()
"""
import logging
import os
import shutil
from pathlib import Path

from tqdm import tqdm

from aiframework.platform_config import overwrite_candidates

# Template paths are resolved relative to the installed package, never the CWD.
TEMPLATE_ROOT = Path(__file__).parent


class TemplateNotFoundError(FileNotFoundError):
    """A bundled template directory is missing from the installed package."""


# ---------------------------------------------------------------------------
# Overwrite check
# ---------------------------------------------------------------------------

def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as exc:
        # e.g. PermissionError on a parent directory: treat as absent
        logging.debug("Existence check failed for %s: %s", path, exc)
        return False


def check_files_to_overwrite(platform: str, cwd: 'Path | None' = None) -> list[str]:
    """
    Return the candidate paths for `platform` that already exist under `cwd`.

    Order follows the candidate table (base list, then platform list).
    Never raises and never touches the filesystem beyond existence checks.
    """
    root = Path(cwd) if cwd is not None else Path.cwd()
    return [
        candidate
        for candidate in overwrite_candidates(platform)
        if _exists(root / candidate)
    ]


# ---------------------------------------------------------------------------
# Template copy
# ---------------------------------------------------------------------------

def resolve_template(source_dir: str, template_root: 'Path | None' = None) -> Path:
    """
    Return the absolute path of a bundled template directory.

    Raises TemplateNotFoundError if it is missing, before anything is written.
    """
    root = Path(template_root) if template_root is not None else TEMPLATE_ROOT
    full_source = root / source_dir
    if not full_source.is_dir():
        raise TemplateNotFoundError(f"Template directory not found: {full_source}")
    return full_source


def template_files(source_dir: str, template_root: 'Path | None' = None) -> list[str]:
    """Return the files of a bundled template as sorted POSIX paths relative to its root."""
    full_source = resolve_template(source_dir, template_root)
    return sorted(
        p.relative_to(full_source).as_posix()
        for p in full_source.rglob("*")
        if p.is_file()
    )


def copy_directory(src: Path, dest: Path, bar: 'tqdm | None' = None) -> list[Path]:
    """
    Recursively copy src into dest, creating dest (and parents) as needed.

    Existing destination files are overwritten without asking; confirmation
    is the caller's job. OSError propagates with no rollback, so a failed
    copy may leave a partial tree. Re-running completes it.
    """
    dest.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    with os.scandir(src) as entries:
        for entry in entries:
            src_path = Path(entry.path)
            dest_path = dest / entry.name

            if entry.is_dir():
                written.extend(copy_directory(src_path, dest_path, bar))
                continue

            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src_path, dest_path)
            logging.debug("Copied %s -> %s", src_path, dest_path)
            written.append(dest_path)
            if bar is not None:
                bar.update(1)

    return written


def copy_template(
    source_dir: str,
    dest_dir: str,
    cwd: 'Path | None' = None,
    template_root: 'Path | None' = None,
    show_progress: bool = False,
) -> list[Path]:
    """
    Copy the bundled template `source_dir` into `dest_dir` under `cwd`.

    Args:
        source_dir: Template path relative to the package (e.g. "templates/.llm").
        dest_dir: Destination relative to cwd ("." for the project root).
        cwd: Project root. Defaults to the process working directory.
        template_root: Override the package directory (for testing).
        show_progress: Show a tqdm bar over the files being copied.

    Returns:
        The destination paths of every file written.

    Raises:
        TemplateNotFoundError: source_dir is not a bundled template. Raised
            before the destination is created.
        OSError: any failure creating directories or copying bytes.
    """
    full_source = resolve_template(source_dir, template_root)
    root = Path(cwd) if cwd is not None else Path.cwd()
    full_dest = root / dest_dir

    total = sum(1 for p in full_source.rglob("*") if p.is_file())
    with tqdm(
        total=total,
        unit="file",
        desc=dest_dir,
        disable=not show_progress,
        leave=False,
    ) as bar:
        written = copy_directory(full_source, full_dest, bar)

    logging.debug("Copied %d file(s) from %s to %s", len(written), full_source, full_dest)
    return written
