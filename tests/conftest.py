import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from contract_forge.core.config import Settings
from contract_forge.core.dependencies import get_compiler, get_generator
from contract_forge.main import app
from contract_forge.services.compiler import ContractCompiler
from contract_forge.services.generator import ContractGenerator

FAKE_HARDHAT = Path(__file__).parent / "fake_hardhat.py"


class FakeCompletions:
    """Mimics openai's chat.completions with canned replies."""

    def __init__(self, replies=None, error=None):
        self.replies = list(replies or [])
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        content = self.replies.pop(0)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
        )


class FakeOpenAI:
    def __init__(self, replies=None, error=None):
        self.completions = FakeCompletions(replies, error)
        self.chat = SimpleNamespace(completions=self.completions)


def make_settings(tmp_path: Path, **overrides) -> Settings:
    project_dir = tmp_path / "project"
    project_dir.mkdir(exist_ok=True)
    values = dict(
        OPENAI_API_KEY=None,
        HARDHAT_PROJECT_DIR=project_dir,
        COMPILE_COMMAND=[sys.executable, str(FAKE_HARDHAT)],
        COMPILE_WORK_DIR=tmp_path / "work",
        COMPILE_TIMEOUT_SECONDS=30.0,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def work_dir(settings):
    return settings.COMPILE_WORK_DIR


@pytest.fixture
def compiler(settings):
    return ContractCompiler(settings)


@pytest.fixture
def generator(settings):
    # No key configured
    return ContractGenerator(settings)


@pytest.fixture
def client(compiler, generator):
    app.dependency_overrides[get_compiler] = lambda: compiler
    app.dependency_overrides[get_generator] = lambda: generator
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fake_openai():
    return FakeOpenAI
