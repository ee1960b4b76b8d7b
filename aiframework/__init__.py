"""
AI Framework: scaffolds LLM context and agent prompt files into a project.

    aiframework init                : interactive platform menu
    aiframework init --claude-code  : Claude Code, no menu
"""

__version__ = "1.0.0"
