import logging
import sys

import questionary
from rich.console import Console
from rich.logging import RichHandler

# Use stderr so rich doesn't conflict with questionary (prompt_toolkit) on stdout
console = Console(stderr=True)

# Use foreground-only colors to avoid background-color clearing issues in some terminals
QUESTIONARY_STYLE = questionary.Style([
    ('qmark', 'fg:cyan bold'),
    ('question', 'bold'),
    ('answer', 'fg:yellow bold'),
    ('pointer', 'fg:cyan bold'),
    ('highlighted', 'fg:cyan bold'),
    ('instruction', 'fg:grey'),
])

SHOW_CURSOR = '\x1b[?25h'


def configure_logging(verbosity: int = 0) -> None:
    level = logging.DEBUG if verbosity > 0 else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(message)s',
        datefmt='[%X]',
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def exit_cancelled(code: int = 1) -> None:
    # prompt_toolkit hides the cursor while a prompt is active
    sys.stdout.write(SHOW_CURSOR)
    sys.stdout.write('\n')
    sys.stdout.flush()
    console.print("[bold red]Exiting.[/bold red]")
    raise SystemExit(code)
