"""
Single-line interactive prompt used by `aiframework init`.

Streams are parameters so the init flow can be driven from tests (or a pipe)
without touching the process-global stdin/stdout.
"""
import logging
import sys
from typing import TextIO


def prompt_user(
    question: str,
    stdin: 'TextIO | None' = None,
    stdout: 'TextIO | None' = None,
) -> str:
    """
    Print `question` and block until one line is read from stdin.

    Returns the line without its terminator (\\n or \\r\\n); everything else,
    including surrounding whitespace and case, is returned as typed.
    Returns "" on EOF so piped / non-interactive runs never hang or crash.
    The caller's streams are never closed.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    stdout.write(question)
    stdout.flush()

    line = stdin.readline()
    if not line:
        logging.debug("EOF on stdin while prompting %r: answering ''.", question)
        # Keep the terminal tidy: the user never pressed Enter.
        stdout.write("\n")
        return ""

    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line
