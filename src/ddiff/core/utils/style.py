"""Terminal colors for rendered diff lines"""

import typer


def colorize(line: str) -> str:
    """Wrap a rendered diff line in ANSI color codes based on its prefix."""
    if line.startswith("@@"):
        return typer.style(line, fg=typer.colors.CYAN)
    if line.startswith("-"):
        return typer.style(line, fg=typer.colors.RED)
    if line.startswith("+"):
        return typer.style(line, fg=typer.colors.GREEN)
    return line
