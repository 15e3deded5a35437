import os
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

# Vendor specific variables, any one of them marks a CI run
_CI_VENDOR_VARS = (
    'GITHUB_ACTIONS',
    'GITLAB_CI',
    'BUILDKITE',
    'CIRCLECI',
    'TRAVIS',
    'JENKINS_URL',
    'TF_BUILD',
    'TEAMCITY_VERSION',
    'CODEBUILD_BUILD_ID',
    'APPVEYOR',
    'BITBUCKET_BUILD_NUMBER',
    'DRONE',
    'NETLIFY',
    'VERCEL',
)

_CI_GENERIC_VARS = ('CONTINUOUS_INTEGRATION', 'BUILD_NUMBER', 'RUN_ID')


def is_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    if 'CI' in env:
        return env['CI'] != 'false'
    return any(name in env for name in _CI_GENERIC_VARS + _CI_VENDOR_VARS)


@dataclass
class RunContext:
    """Read-only signals the questionnaire consults while it runs.

    ``ci`` is called again at every step, so a caller may flip it between
    steps. ``argv`` is the raw argument list of the invocation.
    """
    argv: List[str] = field(default_factory=lambda: sys.argv[1:])
    ci: Callable[[], bool] = is_ci

    def in_ci(self) -> bool:
        return bool(self.ci())

    def has_flag(self, flag: str) -> bool:
        return flag in self.argv
