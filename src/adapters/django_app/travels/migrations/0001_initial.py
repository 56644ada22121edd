"""
Migration inicial para o domínio de viagens.

Cria as tabelas:
- customer: Clientes
- package: Pacotes de viagem
- ticket: Reservas
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: customer
        # =================================================================
        migrations.CreateModel(
            name='CustomerModel',
            fields=[
                ('customer_id', models.BigIntegerField(
                    primary_key=True,
                    serialize=False,
                    help_text='ID do cliente (informado no cadastro)'
                )),
                ('first_name', models.CharField(max_length=255)),
                ('last_name', models.CharField(max_length=255)),
                ('email', models.CharField(
                    max_length=255,
                    db_index=True,
                    help_text='E-mail do cliente'
                )),
                ('password', models.CharField(max_length=255)),
            ],
            options={
                'db_table': 'customer',
                'verbose_name': 'Customer',
                'verbose_name_plural': 'Customers',
                'ordering': ['customer_id'],
            },
        ),

        # =================================================================
        # Tabela: package
        # =================================================================
        migrations.CreateModel(
            name='PackageModel',
            fields=[
                ('id', models.BigIntegerField(
                    primary_key=True,
                    serialize=False,
                    help_text='ID do pacote'
                )),
                ('package_name', models.CharField(max_length=255)),
                ('trip_duration', models.CharField(
                    max_length=100,
                    help_text='Duração da viagem (texto livre)'
                )),
                ('cost_per_person', models.PositiveIntegerField(
                    default=0,
                    help_text='Custo por pessoa'
                )),
            ],
            options={
                'db_table': 'package',
                'verbose_name': 'Package',
                'verbose_name_plural': 'Packages',
                'ordering': ['id'],
            },
        ),

        # =================================================================
        # Tabela: ticket
        # =================================================================
        migrations.CreateModel(
            name='TicketModel',
            fields=[
                ('ticket_id', models.BigIntegerField(
                    primary_key=True,
                    serialize=False,
                    help_text='ID do ticket'
                )),
                ('customer_id', models.BigIntegerField(db_index=True)),
                ('package_id', models.BigIntegerField(db_index=True)),
                ('travel_date', models.DateField(db_index=True)),
                ('total_members', models.IntegerField()),
                ('total_cost', models.BigIntegerField(default=0)),
            ],
            options={
                'db_table': 'ticket',
                'verbose_name': 'Ticket',
                'verbose_name_plural': 'Tickets',
                'ordering': ['ticket_id'],
            },
        ),
        migrations.AddIndex(
            model_name='ticketmodel',
            index=models.Index(
                fields=['customer_id', 'travel_date'],
                name='ticket_customer_date_idx',
            ),
        ),
        migrations.AddIndex(
            model_name='ticketmodel',
            index=models.Index(
                fields=['package_id', 'travel_date'],
                name='ticket_package_date_idx',
            ),
        ),
    ]
