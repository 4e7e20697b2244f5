"""
Shared fixtures for the table generator tests
"""

import os
import sys

import pytest

# Add the project root to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tablegen.config import Settings
from tablegen.logging import setup_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep structlog output off stdout during tests"""
    setup_logging("WARNING")


@pytest.fixture
def settings():
    """Settings with defaults, ignoring any local .env file"""
    return Settings(_env_file=None)


class FakeConsole:
    """Scripted stand-in for input() and print() that records a transcript"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []
        self.transcript = []

    def input(self, prompt):
        self.prompts.append(prompt)
        self.transcript.append(("prompt", prompt))
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def print(self, line=""):
        self.lines.append(line)
        self.transcript.append(("output", line))


@pytest.fixture
def console_factory():
    return FakeConsole
