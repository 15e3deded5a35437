"""Prompt capability used by the questionnaire.

The questionnaire only talks to an ``AbstractPrompter``; the questionary-backed
implementation lives here and tests substitute a scripted one.
"""
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple, Union

import questionary

from create_llama.view.console import QUESTIONARY_STYLE

Choices = List[Tuple[str, Any]]
Validator = Callable[[str], Union[bool, str]]


class PromptCancelled(Exception):
    """Raised when the user aborts a prompt."""


def is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


class AbstractPrompter(ABC):
    @abstractmethod
    def select(self, name: str, message: str, choices: Choices, default: Any = None) -> Any:
        raise NotImplementedError

    @abstractmethod
    def toggle(self, name: str, message: str, default: bool = False) -> bool:
        raise NotImplementedError

    @abstractmethod
    def text(self, name: str, message: str, default: str = '', validate: Optional[Validator] = None) -> str:
        raise NotImplementedError


class QuestionaryPrompter(AbstractPrompter):
    def __init__(self, style: questionary.Style = QUESTIONARY_STYLE, interactive: Optional[bool] = None) -> None:
        self.style = style
        self.interactive = is_interactive() if interactive is None else interactive

    def select(self, name: str, message: str, choices: Choices, default: Any = None) -> Any:
        q_choices = [questionary.Choice(title=title, value=value) for title, value in choices]
        default_choice = next((c for c in q_choices if c.value == default), q_choices[0])
        return self._ask(questionary.select(
            message,
            choices=q_choices,
            default=default_choice,
            style=self.style,
        ))

    def toggle(self, name: str, message: str, default: bool = False) -> bool:
        return bool(self._ask(questionary.confirm(message, default=bool(default), style=self.style)))

    def text(self, name: str, message: str, default: str = '', validate: Optional[Validator] = None) -> str:
        # Batch runs get the default instead of blocking on stdin
        if not self.interactive:
            return default
        kwargs = {'default': default or '', 'style': self.style}
        if validate is not None:
            kwargs['validate'] = validate
        answer = self._ask(questionary.text(message, **kwargs))
        return answer if answer is not None else default

    @staticmethod
    def _ask(question: questionary.Question) -> Any:
        try:
            return question.unsafe_ask()
        except KeyboardInterrupt:
            raise PromptCancelled() from None
