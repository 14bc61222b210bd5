import os

# Settings are cached on first use, so the environment must be in place before the app is imported.
os.environ.setdefault("API_KEY_HEADER_NAME", "X-API-Key")
os.environ.setdefault("API_KEYS", '["test-key"]')  # pydantic settings can parse env JSON lists
os.environ.setdefault("JIRA_BASE_URL", "https://example.atlassian.net")
os.environ.setdefault("JIRA_EMAIL", "user@example.com")
os.environ.setdefault("JIRA_API_TOKEN", "token")
