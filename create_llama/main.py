import argparse
import json
import sys
from typing import List, Optional

import requests

from create_llama.configs.common import (
    COMMUNITY_OWNER,
    COMMUNITY_REPO,
    DEFAULT_PROJECT_NAME,
    ENGINES,
    FRAMEWORKS,
    MODELS,
    TEMPLATES,
    UIS,
)
from create_llama.controller.questions import FolderLister, ask_questions
from create_llama.model.args import QuestionArgs
from create_llama.model.context import RunContext
from create_llama.model.preferences import PreferenceStore
from create_llama.model.project_name import project_name, validate_project_name
from create_llama.remote.github import get_repo_root_folders
from create_llama.view.console import configure_logging, console, exit_cancelled
from create_llama.view.prompts import AbstractPrompter, PromptCancelled, QuestionaryPrompter
from create_llama.view.summary import show_community_templates, show_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='create-llama-py',
        description='Collect the options for a new LlamaIndex chat project.',
        epilog='Answers are remembered in ~/.create-llama.json and reused as defaults.',
    )
    parser.add_argument('project_directory', nargs='?', help='Directory (and name) of the new project')

    parser.add_argument('--template', choices=TEMPLATES, help='Project template')
    parser.add_argument('--framework', choices=FRAMEWORKS, help='Framework to generate')
    parser.add_argument('--engine', choices=ENGINES, help='Chat engine')
    parser.add_argument('--ui', choices=UIS, help='UI for the NextJS frontend')
    parser.add_argument('--model', choices=MODELS, help='OpenAI model')
    parser.add_argument('--open-ai-key', metavar='KEY', help='OpenAI API key')

    parser.add_argument('--frontend', dest='frontend', action='store_true', default=None,
                        help='Generate a NextJS frontend for an Express/FastAPI backend')
    parser.add_argument('--no-frontend', dest='frontend', action='store_false',
                        help='Backend only, do not ask about a frontend')
    parser.add_argument('--eslint', dest='eslint', action='store_true', default=None,
                        help='Initialize with ESLint config')
    parser.add_argument('--no-eslint', dest='eslint', action='store_false',
                        help='Initialize without ESLint config')

    parser.add_argument('--reset-preferences', action='store_true', help='Forget remembered answers before asking')
    parser.add_argument('--list-community', action='store_true', help='List community templates and exit')
    parser.add_argument('--json', action='store_true', help='Print the resolved configuration as JSON on stdout')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Show debug logging')
    return parser


def list_community(list_folders: FolderLister) -> int:
    try:
        with console.status("[bold cyan]Fetching community templates...[/bold cyan]", spinner="dots"):
            folders = list_folders(COMMUNITY_OWNER, COMMUNITY_REPO)
    except requests.RequestException as e:
        console.print(f"[bold red]✗[/bold red]  Could not list community templates: {e}")
        return 1
    show_community_templates(folders)
    return 0


def resolve_project_path(cli_value: Optional[str], prompter: AbstractPrompter) -> str:
    if cli_value and cli_value.strip():
        return cli_value.strip()
    answer = prompter.text(
        'project_path',
        "What is your project named?",
        default=DEFAULT_PROJECT_NAME,
        validate=validate_project_name,
    )
    return (answer or DEFAULT_PROJECT_NAME).strip()


def main(
    argv: Optional[List[str]] = None,
    prompter: Optional[AbstractPrompter] = None,
    store: Optional[PreferenceStore] = None,
    list_folders: FolderLister = get_repo_root_folders,
) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    args = build_parser().parse_args(argv)
    configure_logging(verbosity=args.verbose)

    if args.list_community:
        return list_community(list_folders)

    store = store or PreferenceStore()
    if args.reset_preferences:
        store.reset()
        console.print("[dim]Preferences reset.[/dim]")
    preferences = store.load()
    prompter = prompter or QuestionaryPrompter()

    program = QuestionArgs(
        template=args.template,
        framework=args.framework,
        frontend=args.frontend,
        ui=args.ui,
        model=args.model,
        engine=args.engine,
        open_ai_key=args.open_ai_key,
        eslint=args.eslint,
    )

    try:
        try:
            project_path = resolve_project_path(args.project_directory, prompter)
        except PromptCancelled:
            exit_cancelled()
        valid = validate_project_name(project_path)
        if valid is not True:
            console.print(f"[bold red]✗[/bold red]  Invalid project name \"{project_name(project_path)}\": {valid}")
            return 1

        ask_questions(program, preferences, prompter, RunContext(argv=argv), list_folders)
    except requests.RequestException as e:
        console.print(f"[bold red]✗[/bold red]  Could not fetch community templates: {e}")
        return 1
    except ValueError as e:
        console.print(f"[bold red]✗[/bold red]  {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[dim]Aborted.[/dim]")
        return 1

    store.save(preferences)
    show_summary(project_name(project_path), program)
    if args.json:
        print(json.dumps({'project_path': project_path, **program.to_dict()}, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
