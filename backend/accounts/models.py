"""
Account model for custodial user balances.
Each account owns one deposit wallet that the sweep engine collects from.
"""
from django.db import models
from django.utils import timezone


class Account(models.Model):

    accountsid = models.AutoField(primary_key=True)

    walletaddress = models.CharField(
        max_length=255,
        unique=True,
        db_index=True,
        help_text="User wallet identifier"
    )

    depositwalletaddress = models.CharField(
        max_length=255,
        unique=True,
        help_text="Custodial deposit wallet address"
    )

    # Written by wallet provisioning only, never by the sweep engine
    depositwalletprivatekey = models.CharField(
        max_length=255,
        help_text="Deposit wallet signing key (managed by wallet provisioning)"
    )

    depositpendingbalance = models.DecimalField(
        max_digits=36,
        decimal_places=18,
        default=0,
        help_text="Balance observed at the deposit wallet, not yet swept"
    )

    confirmedbalance = models.DecimalField(
        max_digits=36,
        decimal_places=18,
        default=0,
        help_text="Balance credited to the user"
    )

    createdat = models.DateTimeField(
        default=timezone.now,
        help_text="When the account was created"
    )

    lastupdatedat = models.DateTimeField(
        auto_now=True,
        help_text="Last update timestamp"
    )

    class Meta:
        db_table = 'accounts'
        verbose_name = 'Account'
        verbose_name_plural = 'Accounts'
        ordering = ['accountsid']

    def __str__(self):
        return f"Account {self.accountsid} ({self.walletaddress[:10]}...)"

    def __repr__(self):
        return f"<Account: {self.walletaddress}>"
