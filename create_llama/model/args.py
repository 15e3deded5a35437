from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class QuestionArgs:
    """Answers collected by the questionnaire.

    Every field starts as None, meaning "not answered yet". The same shape is
    used for the remembered preferences of earlier runs.
    """
    template: Optional[str] = None
    community_project_path: Optional[str] = None
    framework: Optional[str] = None
    frontend: Optional[bool] = None
    ui: Optional[str] = None
    model: Optional[str] = None
    engine: Optional[str] = None
    open_ai_key: Optional[str] = None
    eslint: Optional[bool] = None

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuestionArgs':
        known = set(cls.field_names())
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self, skip_unset: bool = False) -> Dict[str, Any]:
        data = asdict(self)
        if skip_unset:
            data = {k: v for k, v in data.items() if v is not None}
        return data


DEFAULTS = QuestionArgs(
    template='streaming',
    community_project_path='',
    framework='nextjs',
    frontend=False,
    ui='html',
    model='gpt-3.5-turbo',
    engine='simple',
    open_ai_key='',
    eslint=True,
)
