from datetime import timedelta
from decimal import Decimal

import pytest

from sweeps.exceptions import InsufficientAfterFeeError
from sweeps.pojos.SweepConfig import SweepConfig
from sweeps.services.SweepDecisionService import SweepDecisionService
from tests.fakes import makeAccount


def testEligibleAccountTransfersPendingMinusFee(sweepConfig):
    decision = SweepDecisionService.evaluate(makeAccount('A', '10'), sweepConfig)

    assert decision.eligible
    assert decision.transferAmount == Decimal('9')


def testBalanceExactlyAtThresholdIsEligible(sweepConfig):
    decision = SweepDecisionService.evaluate(makeAccount('A', '5'), sweepConfig)

    assert decision.eligible
    assert decision.transferAmount == Decimal('4')


def testBalanceBelowThresholdIsNotEligible(sweepConfig):
    decision = SweepDecisionService.evaluate(makeAccount('A', '4.999'), sweepConfig)

    assert not decision.eligible
    assert decision.transferAmount is None


def testZeroBalanceIsNotEligible(sweepConfig):
    assert not SweepDecisionService.evaluate(makeAccount('A', '0'), sweepConfig).eligible


@pytest.mark.parametrize('pending', ['1', '0.8'])
def testFeeConsumingWholeBalanceBlocksSweep(pending):
    config = SweepConfig(collectThreshold=Decimal('0.5'), transferFee=Decimal('1'), cycleInterval=timedelta(hours=1))

    with pytest.raises(InsufficientAfterFeeError) as excInfo:
        SweepDecisionService.evaluate(makeAccount('A', pending), config)

    assert excInfo.value.pendingBalance == Decimal(pending)
    assert excInfo.value.transferFee == Decimal('1')


def testDecisionKeepsDecimalPrecision():
    config = SweepConfig(collectThreshold=Decimal('0.001'), transferFee=Decimal('0.0005'), cycleInterval=timedelta(hours=1))

    decision = SweepDecisionService.evaluate(makeAccount('A', '0.0123456789'), config)

    assert decision.transferAmount == Decimal('0.0118456789')
