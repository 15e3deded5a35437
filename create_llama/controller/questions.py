import logging
from typing import Any, Callable, List, Optional

from create_llama.configs.common import (
    BACKEND_FRAMEWORK_CHOICES,
    COMMUNITY_OWNER,
    COMMUNITY_REPO,
    ENGINE_CHOICES,
    ESLINT_FLAG,
    FRAMEWORK_LABELS,
    MODEL_CHOICES,
    NEXTJS_CHOICE,
    NO_ESLINT_FLAG,
    NO_FRONTEND_FLAG,
    TEMPLATE_CHOICES,
    UI_CHOICES,
)
from create_llama.model.args import DEFAULTS, QuestionArgs
from create_llama.model.context import RunContext
from create_llama.remote.github import get_repo_root_folders
from create_llama.view.console import console, exit_cancelled
from create_llama.view.prompts import AbstractPrompter, PromptCancelled, QuestionaryPrompter

log = logging.getLogger(__name__)

FolderLister = Callable[[str, str], List[str]]


class QuestionFlow:
    """Fill in every unanswered field of ``program``.

    A field that is already set is left alone. Under CI the remembered
    preference (or the built-in default) is used; otherwise the user is asked
    and the answer is written to both ``program`` and ``preferences``.
    """

    def __init__(
        self,
        program: QuestionArgs,
        preferences: QuestionArgs,
        prompter: Optional[AbstractPrompter] = None,
        context: Optional[RunContext] = None,
        list_folders: FolderLister = get_repo_root_folders,
    ) -> None:
        self.program = program
        self.preferences = preferences
        self.prompter = prompter or QuestionaryPrompter()
        self.context = context or RunContext()
        self.list_folders = list_folders

    def run(self) -> QuestionArgs:
        try:
            self._ask_all()
        except PromptCancelled:
            exit_cancelled()
        return self.program

    def _ask_all(self) -> None:
        self.ask_template()

        if self.program.template == 'community':
            self.ask_community_project()
            # Community projects are copied as-is, nothing else to ask
            return

        self.ask_framework()
        self.ask_frontend()
        self.ask_ui()
        self.ask_model()
        self.ask_engine()
        self.ask_open_ai_key()
        self.ask_eslint()

    def pref_or_default(self, field: str) -> Any:
        value = getattr(self.preferences, field)
        return value if value is not None else getattr(DEFAULTS, field)

    def _answer(self, field: str, value: Any) -> None:
        setattr(self.program, field, value)
        setattr(self.preferences, field, value)
        log.debug("%s answered: %r", field, '***' if field == 'open_ai_key' and value else value)

    def _from_ci(self, field: str) -> None:
        value = self.pref_or_default(field)
        setattr(self.program, field, value)
        log.debug("%s taken from preferences/defaults (CI): %r", field, value)

    def ask_template(self) -> None:
        if self.program.template:
            return
        if self.context.in_ci():
            self._from_ci('template')
            return
        template = self.prompter.select(
            'template',
            "Which template would you like to use?",
            choices=TEMPLATE_CHOICES,
            default='streaming',
        )
        self._answer('template', template)

    def ask_community_project(self) -> None:
        if self.program.community_project_path:
            return
        with console.status("[bold cyan]Fetching community templates...[/bold cyan]", spinner="dots"):
            folders = self.list_folders(COMMUNITY_OWNER, COMMUNITY_REPO)
        if not folders:
            raise ValueError(f'No community templates found in {COMMUNITY_OWNER}/{COMMUNITY_REPO}')

        path = self.prompter.select(
            'community_project_path',
            "Select community template",
            choices=[(name, name) for name in folders],
            default=folders[0],
        )
        self._answer('community_project_path', path)

    def framework_choices(self) -> List[tuple]:
        choices = list(BACKEND_FRAMEWORK_CHOICES)
        if self.program.template == 'streaming':
            choices.insert(0, NEXTJS_CHOICE)
        return choices

    def ask_framework(self) -> None:
        if self.program.framework:
            return
        if self.context.in_ci():
            # No template check here: CI trusts the stored preference as-is
            self._from_ci('framework')
            return
        choices = self.framework_choices()
        framework = self.prompter.select(
            'framework',
            "Which framework would you like to use?",
            choices=choices,
            default=choices[0][1],
        )
        self._answer('framework', framework)

    def ask_frontend(self) -> None:
        if self.program.framework not in ('express', 'fastapi'):
            # nextjs is a single full-stack project
            self.program.frontend = False
            return

        if self.context.has_flag(NO_FRONTEND_FLAG):
            self.program.frontend = False
        if self.program.frontend is not None:
            return
        if self.context.in_ci():
            self._from_ci('frontend')
            return
        backend = FRAMEWORK_LABELS[self.program.framework]
        frontend = self.prompter.toggle(
            'frontend',
            f"Would you like to generate a NextJS frontend for your {backend} backend?",
            default=self.pref_or_default('frontend'),
        )
        self._answer('frontend', bool(frontend))

    def ask_ui(self) -> None:
        if self.program.framework != 'nextjs' and not self.program.frontend:
            return
        if self.program.ui:
            return
        if self.context.in_ci():
            self._from_ci('ui')
            return
        ui = self.prompter.select(
            'ui',
            "Which UI would you like to use?",
            choices=UI_CHOICES,
            default='html',
        )
        self._answer('ui', ui)

    def ask_model(self) -> None:
        if self.program.framework not in ('express', 'nextjs') or self.program.model:
            return
        if self.context.in_ci():
            self._from_ci('model')
            return
        model = self.prompter.select(
            'model',
            "Which model would you like to use?",
            choices=MODEL_CHOICES,
            default=MODEL_CHOICES[0][1],
        )
        self._answer('model', model)

    def ask_engine(self) -> None:
        if self.program.framework not in ('express', 'nextjs') or self.program.engine:
            return
        if self.context.in_ci():
            self._from_ci('engine')
            return
        engine = self.prompter.select(
            'engine',
            "Which chat engine would you like to use?",
            choices=ENGINE_CHOICES,
            default=ENGINE_CHOICES[0][1],
        )
        self._answer('engine', engine)

    def ask_open_ai_key(self) -> None:
        # Asked even under CI; the prompter returns the default without a tty
        if self.program.open_ai_key is not None:
            return
        key = self.prompter.text(
            'open_ai_key',
            "Please provide your OpenAI API key (leave blank to skip):",
        )
        self._answer('open_ai_key', key or '')

    def ask_eslint(self) -> None:
        if self.program.framework == 'fastapi':
            return
        if self.context.has_flag(ESLINT_FLAG) or self.context.has_flag(NO_ESLINT_FLAG):
            return
        if self.program.eslint is not None:
            return
        if self.context.in_ci():
            self._from_ci('eslint')
            return
        eslint = self.prompter.toggle(
            'eslint',
            "Would you like to use ESLint?",
            default=self.pref_or_default('eslint'),
        )
        self._answer('eslint', bool(eslint))


def ask_questions(
    program: QuestionArgs,
    preferences: QuestionArgs,
    prompter: Optional[AbstractPrompter] = None,
    context: Optional[RunContext] = None,
    list_folders: FolderLister = get_repo_root_folders,
) -> QuestionArgs:
    return QuestionFlow(program, preferences, prompter, context, list_folders).run()
