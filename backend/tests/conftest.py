"""
Test setup: Django configured from config.settings with the engine disabled.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
os.environ['SWEEP_ENGINE_ENABLED'] = 'False'

import django

django.setup()

import pytest
from datetime import timedelta
from decimal import Decimal

from sweeps.SweepContext import SweepContext
from sweeps.locks.WalletLockTable import WalletLockTable
from sweeps.pojos.SweepConfig import SweepConfig
from tests.fakes import (
    FakeChain,
    FakeCredentialLoader,
    FakeMasterWalletResolver,
    InMemoryAccountStore,
)


@pytest.fixture(scope='session')
def djangoDatabase():
    """Create the test database once for ORM-backed tests."""
    from django.db import connection
    from django.test.utils import setup_test_environment, teardown_test_environment

    setup_test_environment()
    oldName = connection.creation.create_test_db(verbosity=0, autoclobber=True)
    yield connection
    connection.creation.destroy_test_db(oldName, verbosity=0)
    teardown_test_environment()


@pytest.fixture
def sweepConfig():
    return SweepConfig(
        collectThreshold=Decimal('5'),
        transferFee=Decimal('1'),
        cycleInterval=timedelta(seconds=3600),
    )


@pytest.fixture
def accountStore():
    return InMemoryAccountStore()


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def masterWalletResolver():
    return FakeMasterWalletResolver()


@pytest.fixture
def walletLocks():
    return WalletLockTable()


@pytest.fixture
def sweepContext(sweepConfig, accountStore, chain, masterWalletResolver, walletLocks):
    return SweepContext(
        config=sweepConfig,
        accountStore=accountStore,
        masterWalletResolver=masterWalletResolver,
        credentialLoader=FakeCredentialLoader(),
        transferService=chain,
        balanceService=chain,
        walletLocks=walletLocks,
    )
