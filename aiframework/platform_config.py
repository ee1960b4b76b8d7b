"""
Platform table for `aiframework init`.

Every supported AI platform is a single Platform entry in PLATFORMS. Adding a
platform means adding its template tree under aiframework/platforms/<key>/
and one entry here; nothing in the init flow needs to change.
"""
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Shared .llm tree (copied for every platform)
# ---------------------------------------------------------------------------

SHARED_TEMPLATE_DIR = "templates/.llm"
SHARED_DEST_DIR = ".llm"

# Checked on every run, in this order.
BASE_OVERWRITE_CANDIDATES: tuple[str, ...] = (
    ".llm/README.md",
    ".llm/tasks/analyze-codebase.md",
    ".llm/tasks/generate-context.md",
    ".llm/tasks/create-agents.md",
    ".llm/templates/project-context.md",
    ".llm/templates/agent.md",
    ".llm/generated/README.md",
)


@dataclass(frozen=True)
class Platform:
    key: str
    label: str
    keywords: tuple[str, ...]
    template_dir: str
    overwrite_candidates: tuple[str, ...]
    next_steps: tuple[tuple[str, str], ...]


CLAUDE_CODE = Platform(
    key="claude-code",
    label="Claude Code",
    keywords=("claude",),
    template_dir="platforms/claude-code/templates",
    overwrite_candidates=(
        ".claude/agents/llm-generator.md",
        ".claude/agents/agent-builder.md",
    ),
    next_steps=(
        ("Install Context7 MCP:",
         "claude mcp add context7 -- npx -y @upstash/context7-mcp"),
        ("Generate project context:",
         "@llm-generator analyze this project and generate context"),
        ("Create specialized agents:",
         "@agent-builder create specialized agents for this project"),
    ),
)

# Menu order: index 1 is the default selected by an empty answer.
PLATFORMS: dict[str, Platform] = {
    CLAUDE_CODE.key: CLAUDE_CODE,
}


def get_platform(key: str) -> 'Platform | None':
    return PLATFORMS.get(key)


def overwrite_candidates(key: str) -> list[str]:
    """
    Return the base candidate list followed by the platform's own candidates.
    Unknown platform keys get the base list only.
    """
    candidates = list(BASE_OVERWRITE_CANDIDATES)
    platform = get_platform(key)
    if platform is not None:
        candidates.extend(platform.overwrite_candidates)
    return candidates


def match_choice(choice: str) -> 'Platform | None':
    """
    Map an answer typed at the platform menu to a Platform.

    Matches, in order:
      - empty answer             -> the first (default) platform
      - the 1-based menu number  -> that platform
      - any platform keyword contained in the answer (case-insensitive)
    Returns None for anything else.
    """
    platforms = list(PLATFORMS.values())
    answer = choice.strip()
    if not answer:
        return platforms[0] if platforms else None

    if answer.isdecimal():
        index = int(answer)
        if 1 <= index <= len(platforms):
            return platforms[index - 1]
        return None

    lowered = answer.lower()
    for platform in platforms:
        if any(keyword in lowered for keyword in platform.keywords):
            return platform
    return None
