"""CLI Utility Functions"""

from claude_commit.output import bold, dim, info, note, success

CONFIRM_PROMPT = "Do you want to create a commit with this message? [y/N]"


def confirm(prompt: str = CONFIRM_PROMPT) -> bool:
    """Ask a yes/no question on stdin. Only 'y' or 'Y' counts as yes."""
    try:
        answer = input(f"\n{info(prompt)} ")
    except (KeyboardInterrupt, EOFError):
        print()
        return False
    return answer.strip().lower() == 'y'


def display_message(message: str) -> None:
    """Show the suggested commit message between horizontal rules."""
    lines = message.split('\n')
    width = max((len(line) for line in lines), default=40)
    print(f"\n{success(bold('Suggested commit message:'))}")
    print(dim('─' * width))
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim('─' * width))


def display_diff(diff: str) -> None:
    """Verbose mode: echo the diff and its length before it is sent."""
    print(dim(f"Got diff of length: {len(diff)}"))
    print(note("Sending the following diff to Claude:"))
    print(diff)
