from concurrent.futures import Future
from datetime import datetime, timezone

import pytest

from use_cases.session_controller import SessionController
from use_cases.session_models import AuthResult, SessionFlags, StoreResult

FIXED_NOW = datetime(2025, 2, 9, 12, 0, 0, tzinfo=timezone.utc)


def completed(value):
    future = Future()
    future.set_result(value)
    return future


class FakeIdentityGateway:
    def __init__(self, sign_in_result=None, sign_up_result=None):
        self.sign_in_result = sign_in_result or AuthResult.success("uid-existing")
        self.sign_up_result = sign_up_result or AuthResult.success("uid-new")
        self.calls = []

    def sign_in(self, email, password):
        self.calls.append(("sign_in", email, password))
        return completed(self.sign_in_result)

    def sign_up(self, email, password):
        self.calls.append(("sign_up", email, password))
        return completed(self.sign_up_result)


class FakeProfileStore:
    def __init__(self, result=None):
        self.result = result or StoreResult()
        self.created = []

    def create(self, profile):
        self.created.append(profile)
        return completed(self.result)


class InMemoryFlagStore:
    def __init__(self, flags=None):
        self.flags = flags or SessionFlags()
        self.saves = 0

    def load_flags(self):
        return self.flags

    def save_flags(self, flags):
        self.flags = flags
        self.saves += 1


@pytest.fixture
def identity():
    return FakeIdentityGateway()


@pytest.fixture
def profiles():
    return FakeProfileStore()


@pytest.fixture
def flag_store():
    return InMemoryFlagStore()


@pytest.fixture
def make_controller(identity, profiles, flag_store):
    def _make(flags=None):
        if flags is not None:
            flag_store.flags = flags
        return SessionController(identity, profiles, flag_store, clock=lambda: FIXED_NOW)
    return _make
