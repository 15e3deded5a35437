import logging
from typing import List, Optional

import requests

from create_llama.configs.common import GITHUB_API_URL

log = logging.getLogger(__name__)

HTTP_TIMEOUT = 10


class GitHubRequest:
    def __init__(self, session: Optional[requests.Session] = None, base_url: str = GITHUB_API_URL) -> None:
        self.sess = session or requests.Session()
        self.base_url = base_url.rstrip('/')
        self.headers = {
            'Accept': 'application/vnd.github+json',
            'User-Agent': 'create-llama-py',
        }

    def repo_contents(self, owner: str, repo: str) -> list:
        url = f'{self.base_url}/repos/{owner}/{repo}/contents'
        log.debug("GET %s", url)
        resp = self.sess.get(url, headers=self.headers, timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
        return resp.json()


def get_repo_root_folders(owner: str, repo: str, client: Optional[GitHubRequest] = None) -> List[str]:
    """Names of the top-level directories of a GitHub repository, in API order."""
    client = client or GitHubRequest()
    entries = client.repo_contents(owner, repo)
    return [entry['name'] for entry in entries if entry.get('type') == 'dir']
