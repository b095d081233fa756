from decimal import Decimal

import pytest

from sweeps.services.ReconciliationService import ReconciliationService


def testSweptToZeroLeavesConfirmedUnchanged():
    balances = ReconciliationService.reconcile(Decimal('3'), Decimal('10'), Decimal('0'))

    assert balances.depositPendingBalance == Decimal('0')
    assert balances.confirmedBalance == Decimal('3')
    assert not balances.depositDetected


def testLeftoverBelowPreSweepIsCarriedAsPending():
    balances = ReconciliationService.reconcile(Decimal('3'), Decimal('10'), Decimal('2'))

    assert balances.depositPendingBalance == Decimal('2')
    assert balances.confirmedBalance == Decimal('3')
    assert balances.detectedDeposit == Decimal('0')


def testBalanceEqualToPreSweepIsNotADeposit():
    balances = ReconciliationService.reconcile(Decimal('0'), Decimal('10'), Decimal('10'))

    assert balances.depositPendingBalance == Decimal('10')
    assert balances.confirmedBalance == Decimal('0')
    assert not balances.depositDetected


def testDepositDuringSweepCreditsDeltaAndStaysPending():
    balances = ReconciliationService.reconcile(Decimal('1'), Decimal('10'), Decimal('12.5'))

    assert balances.depositDetected
    assert balances.detectedDeposit == Decimal('2.5')
    assert balances.confirmedBalance == Decimal('3.5')
    assert balances.depositPendingBalance == Decimal('12.5')


@pytest.mark.parametrize('confirmed, pre, post', [
    ('0', '5', '0'),
    ('0', '5', '5.000000000000000001'),
    ('7', '0.001', '0.0015'),
    ('2', '9', '4'),
    ('0', '0', '1'),
])
def testPendingAlwaysBecomesObservedBalance(confirmed, pre, post):
    confirmed, pre, post = Decimal(confirmed), Decimal(pre), Decimal(post)

    balances = ReconciliationService.reconcile(confirmed, pre, post)

    assert balances.depositPendingBalance == post
    if post > pre:
        assert balances.confirmedBalance - confirmed == post - pre
    else:
        assert balances.confirmedBalance == confirmed
