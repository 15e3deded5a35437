import json
import logging
import os
from typing import Optional

from create_llama.configs.common import PREFERENCES_PATH
from create_llama.model.args import QuestionArgs
from create_llama.view.console import console

log = logging.getLogger(__name__)


class PreferenceStore:
    """Remembers questionnaire answers between runs in a small JSON file."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = os.path.expanduser(path or PREFERENCES_PATH)

    def load(self) -> QuestionArgs:
        if not os.path.exists(self.path):
            return QuestionArgs()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            console.print(f"[bold yellow]⚠[/bold yellow]  Could not read preferences: {e}")
            return QuestionArgs()
        if not isinstance(data, dict):
            console.print(f"[bold yellow]⚠[/bold yellow]  Ignoring malformed preferences in {self.path}")
            return QuestionArgs()
        log.debug("loaded preferences from %s", self.path)
        return QuestionArgs.from_dict(data)

    def save(self, preferences: QuestionArgs) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(preferences.to_dict(skip_unset=True), f, indent=2)
        log.debug("saved preferences to %s", self.path)

    def reset(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
            log.debug("removed preferences at %s", self.path)
