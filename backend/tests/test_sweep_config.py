from datetime import timedelta
from decimal import Decimal

import pytest
from django.test import override_settings

from sweeps.Constants import DEFAULT_COLLECT_THRESHOLD, DEFAULT_TRANSFER_FEE
from sweeps.pojos.SweepConfig import SweepConfig


def testDefaultsMatchWithdrawTaxAndHourlyInterval():
    config = SweepConfig()

    assert config.collectThreshold == DEFAULT_COLLECT_THRESHOLD
    assert config.transferFee == DEFAULT_TRANSFER_FEE
    assert config.cycleIntervalSeconds == 3600


def testNumericInputIsCoercedToDecimal():
    config = SweepConfig(collectThreshold='0.01', transferFee=0.001, cycleInterval=timedelta(minutes=5))

    assert config.collectThreshold == Decimal('0.01')
    assert config.transferFee == Decimal('0.001')
    assert isinstance(config.transferFee, Decimal)


@pytest.mark.parametrize('kwargs', [
    {'collectThreshold': Decimal('-1')},
    {'transferFee': Decimal('-0.1')},
    {'cycleInterval': timedelta(seconds=0)},
    {'cycleInterval': timedelta(seconds=-5)},
])
def testInvalidValuesAreRejected(kwargs):
    with pytest.raises(ValueError):
        SweepConfig(**kwargs)


def testThresholdNotAboveFeeLogsWarning(caplog):
    SweepConfig(collectThreshold=Decimal('1'), transferFee=Decimal('1'))

    assert 'Threshold does not exceed fee' in caplog.text


@override_settings(SWEEP_COLLECT_THRESHOLD='5', SWEEP_TRANSFER_FEE='1', SWEEP_CYCLE_INTERVAL_SECONDS=120)
def testFromSettingsReadsSweepValues():
    config = SweepConfig.fromSettings()

    assert config.collectThreshold == Decimal('5')
    assert config.transferFee == Decimal('1')
    assert config.cycleInterval == timedelta(seconds=120)
