import os
import re
from typing import Union

_URL_SAFE = re.compile(r"^(?:@[a-z0-9~][a-z0-9._~-]*/)?[a-z0-9~][a-z0-9._~-]*$")
_RESERVED = {'node_modules', 'favicon.ico'}
MAX_NAME_LENGTH = 214


def project_name(path: str) -> str:
    return os.path.basename(os.path.normpath(os.path.abspath(path.strip())))


def validate_project_name(value: str) -> Union[bool, str]:
    """Check a project path against npm package naming rules.

    Returns True when valid, otherwise the reason, which is the shape
    questionary expects from a ``validate`` callback.
    """
    if not value or not value.strip():
        return "Project name cannot be empty"
    name = project_name(value)
    if name.startswith('.') or name.startswith('_'):
        return "Name cannot start with a period or an underscore"
    if name in _RESERVED:
        return f"{name} is a reserved name"
    if len(name) > MAX_NAME_LENGTH:
        return f"Name cannot be longer than {MAX_NAME_LENGTH} characters"
    if name != name.lower():
        return "Name can no longer contain capital letters"
    if name != name.strip() or ' ' in name:
        return "Name cannot contain spaces"
    if not _URL_SAFE.match(name):
        return "Name can only contain URL-friendly characters"
    return True
