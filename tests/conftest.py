from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


############ CONFIG FIXTURES ############

# Stand-in for a deployed contract's address
@pytest.fixture(scope="session")
def address():
    yield "0x5FbDB2315678afecb367f032d93F642f64180aa3"


@pytest.fixture(scope="session")
def network_choice():
    yield "ethereum:sepolia"


@pytest.fixture(scope="session")
def minimum_stake():
    yield 10**16


############ STANDARD FIXTURES ############


@pytest.fixture
def container():
    yield MagicMock(name="Project")


@pytest.fixture
def deployed(address):
    yield SimpleNamespace(address=address)


@pytest.fixture
def signer(deployed):
    signer = MagicMock(name="deployer")
    signer.address = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
    signer.deploy.return_value = deployed

    yield signer


@pytest.fixture
def local_account():
    yield SimpleNamespace(address="0x70997970C51812dc3A010C7d01b50e0d17dc79C8")


@pytest.fixture
def accounts(local_account):
    # Shadows ape's `accounts` fixture so no keyfile is ever touched
    yield SimpleNamespace(test_accounts=[local_account], load=MagicMock())


@pytest.fixture
def network():
    yield SimpleNamespace(
        name="sepolia", choice="ethereum:sepolia", publish_contract=MagicMock()
    )
