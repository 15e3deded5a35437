COMMUNITY_OWNER = 'run-llama'
COMMUNITY_REPO = 'create_llama_projects'

GITHUB_API_URL = 'https://api.github.com'

DEFAULT_PROJECT_NAME = 'my-app'

TEMPLATE_CHOICES = [
    ('Chat without streaming', 'simple'),
    ('Chat with streaming', 'streaming'),
    (f'Community template from https://github.com/{COMMUNITY_OWNER}/{COMMUNITY_REPO}', 'community'),
]

# NextJS is prepended only for the streaming template
BACKEND_FRAMEWORK_CHOICES = [
    ('Express', 'express'),
    ('FastAPI (Python)', 'fastapi'),
]
NEXTJS_CHOICE = ('NextJS', 'nextjs')

FRAMEWORK_LABELS = {
    'nextjs': 'NextJS',
    'express': 'Express',
    'fastapi': 'FastAPI (Python)',
}

UI_CHOICES = [
    ('Just HTML', 'html'),
    ('Shadcn', 'shadcn'),
]

MODEL_CHOICES = [
    ('gpt-3.5-turbo', 'gpt-3.5-turbo'),
    ('gpt-4', 'gpt-4'),
    ('gpt-4-1106-preview', 'gpt-4-1106-preview'),
    ('gpt-4-vision-preview', 'gpt-4-vision-preview'),
]

ENGINE_CHOICES = [
    ('ContextChatEngine', 'context'),
    ('SimpleChatEngine (no data, just chat)', 'simple'),
]

TEMPLATES = [value for _, value in TEMPLATE_CHOICES]
FRAMEWORKS = list(FRAMEWORK_LABELS)
UIS = [value for _, value in UI_CHOICES]
MODELS = [value for _, value in MODEL_CHOICES]
ENGINES = [value for _, value in ENGINE_CHOICES]

# Raw argv flags the questionnaire inspects directly
NO_FRONTEND_FLAG = '--no-frontend'
ESLINT_FLAG = '--eslint'
NO_ESLINT_FLAG = '--no-eslint'

PREFERENCES_PATH = '~/.create-llama.json'
