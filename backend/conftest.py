import pytest

from splitledger import create_app
from splitledger.config import TestConfig
from splitledger.core import BalanceLedger, ExpenseFactory, Participant, ParticipantDirectory
from splitledger.extensions import get_state
from splitledger.participants.seed import DEFAULT_PARTICIPANTS, seed_directory


@pytest.fixture
def directory():
    d = ParticipantDirectory()
    seed_directory(d, DEFAULT_PARTICIPANTS)
    return d


@pytest.fixture
def factory(directory):
    return ExpenseFactory(directory)


@pytest.fixture
def ledger(directory):
    return BalanceLedger(directory)


@pytest.fixture
def record(factory, ledger):
    """Create an expense and apply it."""
    def _record(kind, amount, payer_id, descriptors):
        expense = factory.create_expense(kind, amount, payer_id, descriptors)
        ledger.apply_expense(expense)
        return expense
    return _record


class SeededConfig(TestConfig):
    SEED_DEFAULT_PARTICIPANTS = True


@pytest.fixture
def app():
    return create_app(SeededConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def state(app):
    with app.app_context():
        yield get_state()


@pytest.fixture
def alice():
    return Participant("alice", "Alice", "alice@example.com")
