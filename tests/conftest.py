from typing import Any, Dict, List, Optional

import pytest

from create_llama.model.args import QuestionArgs
from create_llama.model.context import RunContext
from create_llama.view.prompts import AbstractPrompter, PromptCancelled


class ScriptedPrompter(AbstractPrompter):
    """Answers prompts from a dict keyed by prompt name and records every call."""

    CANCEL = object()

    def __init__(self, answers: Optional[Dict[str, Any]] = None) -> None:
        self.answers = dict(answers or {})
        self.calls: List[Dict[str, Any]] = []

    @property
    def asked(self) -> List[str]:
        return [c['name'] for c in self.calls]

    def call(self, name: str) -> Dict[str, Any]:
        return next(c for c in self.calls if c['name'] == name)

    def _reply(self, name: str) -> Any:
        if name not in self.answers:
            raise AssertionError(f"unexpected prompt: {name}")
        answer = self.answers[name]
        if answer is self.CANCEL:
            raise PromptCancelled()
        return answer

    def select(self, name, message, choices, default=None):
        self.calls.append({'kind': 'select', 'name': name, 'message': message,
                           'choices': [v for _, v in choices], 'default': default})
        return self._reply(name)

    def toggle(self, name, message, default=False):
        self.calls.append({'kind': 'toggle', 'name': name, 'message': message, 'default': default})
        return self._reply(name)

    def text(self, name, message, default='', validate=None):
        self.calls.append({'kind': 'text', 'name': name, 'message': message, 'default': default})
        return self._reply(name)


@pytest.fixture
def program() -> QuestionArgs:
    return QuestionArgs()


@pytest.fixture
def preferences() -> QuestionArgs:
    return QuestionArgs()


@pytest.fixture
def interactive() -> RunContext:
    return RunContext(argv=[], ci=lambda: False)


@pytest.fixture
def ci() -> RunContext:
    return RunContext(argv=[], ci=lambda: True)


@pytest.fixture
def folders():
    calls = []

    def _list(owner, repo):
        calls.append((owner, repo))
        return ['multi-document-agent', 'embedded-tables']

    _list.calls = calls
    return _list


@pytest.fixture
def make_prompter():
    return ScriptedPrompter
