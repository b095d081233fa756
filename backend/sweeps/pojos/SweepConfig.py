"""
Sweep engine configuration values.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from sweeps.Constants import (
    DEFAULT_COLLECT_THRESHOLD,
    DEFAULT_TRANSFER_FEE,
    DEFAULT_CYCLE_INTERVAL_SECONDS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepConfig:
    collectThreshold: Decimal = DEFAULT_COLLECT_THRESHOLD
    transferFee: Decimal = DEFAULT_TRANSFER_FEE
    cycleInterval: timedelta = timedelta(seconds=DEFAULT_CYCLE_INTERVAL_SECONDS)

    def __post_init__(self):
        # Accept str/int/float input but always hold Decimals
        object.__setattr__(self, 'collectThreshold', Decimal(str(self.collectThreshold)))
        object.__setattr__(self, 'transferFee', Decimal(str(self.transferFee)))

        if self.collectThreshold < 0:
            raise ValueError(f"collectThreshold must be non-negative, got {self.collectThreshold}")
        if self.transferFee < 0:
            raise ValueError(f"transferFee must be non-negative, got {self.transferFee}")
        if self.cycleInterval.total_seconds() <= 0:
            raise ValueError(f"cycleInterval must be positive, got {self.cycleInterval}")

        if self.collectThreshold <= self.transferFee:
            logger.warning(
                "SWEEP_CONFIG :: Threshold does not exceed fee, some eligible accounts will be skipped | "
                "Threshold: %s | Fee: %s",
                self.collectThreshold, self.transferFee
            )

    @property
    def cycleIntervalSeconds(self) -> float:
        return self.cycleInterval.total_seconds()

    @classmethod
    def fromSettings(cls) -> 'SweepConfig':
        """Build configuration from Django settings (SWEEP_* values)."""
        from django.conf import settings

        return cls(
            collectThreshold=Decimal(str(getattr(settings, 'SWEEP_COLLECT_THRESHOLD', DEFAULT_COLLECT_THRESHOLD))),
            transferFee=Decimal(str(getattr(settings, 'SWEEP_TRANSFER_FEE', DEFAULT_TRANSFER_FEE))),
            cycleInterval=timedelta(
                seconds=float(getattr(settings, 'SWEEP_CYCLE_INTERVAL_SECONDS', DEFAULT_CYCLE_INTERVAL_SECONDS))
            ),
        )
