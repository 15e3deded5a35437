from typing import List

from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from create_llama.model.args import QuestionArgs
from create_llama.view.console import console

_LABELS = [
    ('template', 'Template'),
    ('community_project_path', 'Community template'),
    ('framework', 'Framework'),
    ('frontend', 'Frontend'),
    ('ui', 'UI'),
    ('model', 'Model'),
    ('engine', 'Chat engine'),
    ('open_ai_key', 'OpenAI key'),
    ('eslint', 'ESLint'),
]


def _display(field: str, value) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if field == 'open_ai_key':
        if not value:
            return "[dim](skipped)[/dim]"
        return "****" if len(value) <= 8 else f"{value[:3]}…{value[-4:]}"
    return str(value)


def show_summary(project_name: str, program: QuestionArgs) -> None:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold dim", min_width=18)
    grid.add_column()
    grid.add_row("Project", f"[bold yellow]{project_name}[/bold yellow]")
    for field, label in _LABELS:
        value = getattr(program, field)
        if value is None or (field == 'community_project_path' and not value):
            continue
        grid.add_row(label, _display(field, value))

    console.print()
    console.print(Panel(
        grid,
        title="[bold green]✓ Configuration ready[/bold green]",
        border_style="green",
        padding=(1, 2),
    ))


def show_community_templates(folders: List[str]) -> None:
    console.print(Rule("[bold cyan]Community templates[/bold cyan]", style="cyan"))
    table = Table(show_header=False, box=None, padding=(0, 3))
    table.add_column("#", style="dim", width=4)
    table.add_column("Folder")
    for idx, name in enumerate(folders, 1):
        table.add_row(str(idx), name)
    console.print(table)
