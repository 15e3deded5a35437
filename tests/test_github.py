import pytest
import requests

from create_llama.remote.github import GitHubRequest, get_repo_root_folders


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append({'url': url, 'headers': headers, 'timeout': timeout})
        return self.response


def test_root_folders_keeps_directories_in_order():
    session = FakeSession(FakeResponse([
        {'name': 'README.md', 'type': 'file'},
        {'name': 'multi-document-agent', 'type': 'dir'},
        {'name': '.github', 'type': 'dir'},
        {'name': 'embedded-tables', 'type': 'dir'},
    ]))

    folders = get_repo_root_folders('run-llama', 'create_llama_projects', GitHubRequest(session=session))

    assert folders == ['multi-document-agent', '.github', 'embedded-tables']
    req = session.requests[0]
    assert req['url'] == 'https://api.github.com/repos/run-llama/create_llama_projects/contents'
    assert req['headers']['Accept'] == 'application/vnd.github+json'
    assert req['timeout'] > 0


def test_root_folders_raises_on_http_error():
    session = FakeSession(FakeResponse({'message': 'Not Found'}, status_code=404))
    with pytest.raises(requests.HTTPError):
        get_repo_root_folders('run-llama', 'missing', GitHubRequest(session=session))


def test_repo_contents_uses_custom_base_url():
    session = FakeSession(FakeResponse([]))
    GitHubRequest(session=session, base_url='https://ghe.example.com/api/v3/').repo_contents('o', 'r')
    assert session.requests[0]['url'] == 'https://ghe.example.com/api/v3/repos/o/r/contents'
