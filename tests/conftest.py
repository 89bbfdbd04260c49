"""Shared fixtures: an in-memory AWS CLI store and a scripted prompter."""

import pytest

from awsprof.aws.exceptions import TokenExchangeError
from awsprof.models.profile import Credentials
from awsprof.profiles import ProfileContext


class FakeAws:
    """In-memory stand-in for AwsCli (profile store + token service)."""

    def __init__(self, profiles=None):
        self.profiles = {name: dict(values) for name, values in (profiles or {}).items()}
        self.writes = []
        self.token_calls = []
        self.token_error = None
        self.credentials = Credentials(
            AccessKeyId="ASIATEMP",
            SecretAccessKey="temp-secret",
            SessionToken="temp-token",
            Expiration="2026-10-20T12:00:00+00:00",
        )
        self.environ_during_token_call = None
        self.context = None

    def list_profiles(self):
        return set(self.profiles)

    def profile_exists(self, name):
        return name in self.profiles

    def get_value(self, profile, key):
        return self.profiles.get(profile, {}).get(key)

    def set_value(self, profile, key, value):
        self.writes.append((profile, key, value))
        self.profiles.setdefault(profile, {})[key] = value

    def get_session_token(self, profile, serial_number, token_code, duration_seconds):
        self.token_calls.append((profile, serial_number, token_code, duration_seconds))
        if self.context is not None:
            self.environ_during_token_call = self.context.get()
        if self.token_error is not None:
            raise self.token_error
        return self.credentials

    def fail_token_exchange(self, response="An error occurred (AccessDenied): MultiFactorAuthentication failed"):
        self.token_error = TokenExchangeError(response)


class FakePrompter:
    """Answers prompts from queues and records what was asked."""

    def __init__(self, secrets=None, texts=None, choice=None):
        self.secrets = list(secrets or [])
        self.texts = list(texts or [])
        self.choice = choice
        self.asked = []
        self.menus = []

    def secret(self, label):
        self.asked.append(label)
        return self.secrets.pop(0)

    def text(self, label):
        self.asked.append(label)
        return self.texts.pop(0)

    def choose(self, items, title):
        self.menus.append(list(items))
        return self.choice


@pytest.fixture
def aws():
    return FakeAws()


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def environ():
    return {}


@pytest.fixture
def context(environ):
    return ProfileContext(environ=environ)
