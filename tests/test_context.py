import pytest

from create_llama.model.context import RunContext, is_ci


@pytest.mark.parametrize('environ,expected', [
    ({}, False),
    ({'CI': 'true'}, True),
    ({'CI': '1'}, True),
    ({'CI': 'false'}, False),
    ({'CI': 'false', 'GITHUB_ACTIONS': 'true'}, False),
    ({'GITHUB_ACTIONS': 'true'}, True),
    ({'BUILD_NUMBER': '42'}, True),
    ({'HOME': '/root'}, False),
])
def test_is_ci(environ, expected):
    assert is_ci(environ) is expected


def test_is_ci_reads_process_environment(monkeypatch):
    monkeypatch.setenv('CI', 'true')
    assert is_ci() is True
    monkeypatch.setenv('CI', 'false')
    assert is_ci() is False


def test_run_context_flags():
    context = RunContext(argv=['app', '--no-eslint'], ci=lambda: True)
    assert context.has_flag('--no-eslint')
    assert not context.has_flag('--eslint')
    assert context.in_ci() is True


def test_run_context_consults_ci_each_time():
    answers = iter([True, False])
    context = RunContext(ci=lambda: next(answers))
    assert context.in_ci() is True
    assert context.in_ci() is False


def test_run_context_defaults_to_process_arguments(monkeypatch):
    monkeypatch.setattr('sys.argv', ['create-llama-py', 'my-app', '--eslint'])
    context = RunContext()
    assert context.argv == ['my-app', '--eslint']
    assert context.has_flag('--eslint')
