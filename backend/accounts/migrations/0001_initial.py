# Generated migration for the accounts table

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('accountsid', models.AutoField(primary_key=True, serialize=False)),
                ('walletaddress', models.CharField(db_index=True, help_text='User wallet identifier', max_length=255, unique=True)),
                ('depositwalletaddress', models.CharField(help_text='Custodial deposit wallet address', max_length=255, unique=True)),
                ('depositwalletprivatekey', models.CharField(help_text='Deposit wallet signing key (managed by wallet provisioning)', max_length=255)),
                ('depositpendingbalance', models.DecimalField(decimal_places=18, default=0, help_text='Balance observed at the deposit wallet, not yet swept', max_digits=36)),
                ('confirmedbalance', models.DecimalField(decimal_places=18, default=0, help_text='Balance credited to the user', max_digits=36)),
                ('createdat', models.DateTimeField(default=django.utils.timezone.now, help_text='When the account was created')),
                ('lastupdatedat', models.DateTimeField(auto_now=True, help_text='Last update timestamp')),
            ],
            options={
                'verbose_name': 'Account',
                'verbose_name_plural': 'Accounts',
                'db_table': 'accounts',
                'ordering': ['accountsid'],
            },
        ),
    ]
