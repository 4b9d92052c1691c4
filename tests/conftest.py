import pytest

from fluid_tokens.adapters.memory_store import InMemoryKeyValueStore
from fluid_tokens.components.tokens import families_from_rules
from fluid_tokens.rules.loader import load_rules
from fluid_tokens.rules.models import Rules


@pytest.fixture
def rules() -> Rules:
    """Packaged rules file."""
    return load_rules()


@pytest.fixture
def families(rules: Rules):
    return families_from_rules(rules)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Fresh in-memory key-value store."""
    return InMemoryKeyValueStore()
