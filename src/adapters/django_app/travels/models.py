"""
Django Models para o domínio de viagens.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/{customers,packages,tickets}.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Tabelas:
- customer: Clientes cadastrados
- package: Pacotes de viagem
- ticket: Reservas (referências por id inteiro, sem FK)
"""

from django.db import models


class CustomerModel(models.Model):
    """
    Model Django para persistência de Clientes.

    Fields:
        customer_id: ID atribuído externamente (primary key)
        first_name: Primeiro nome
        last_name: Sobrenome
        email: E-mail
        password: Senha armazenada como recebida
    """

    customer_id = models.BigIntegerField(
        primary_key=True,
        help_text="ID do cliente (informado no cadastro)"
    )

    first_name = models.CharField(max_length=255)

    last_name = models.CharField(max_length=255)

    email = models.CharField(
        max_length=255,
        db_index=True,
        help_text="E-mail do cliente"
    )

    password = models.CharField(max_length=255)

    class Meta:
        db_table = 'customer'
        verbose_name = 'Customer'
        verbose_name_plural = 'Customers'
        ordering = ['customer_id']

    def __str__(self):
        return f"[{self.customer_id}] {self.first_name} {self.last_name}"


class PackageModel(models.Model):
    """
    Model Django para persistência de Pacotes.

    Fields:
        id: ID do pacote (primary key, não auto-incrementa)
        package_name: Nome do pacote
        trip_duration: Duração em texto livre (ex: "2 Days")
        cost_per_person: Custo por pessoa em unidades inteiras
    """

    id = models.BigIntegerField(
        primary_key=True,
        help_text="ID do pacote"
    )

    package_name = models.CharField(max_length=255)

    trip_duration = models.CharField(
        max_length=100,
        help_text="Duração da viagem (texto livre)"
    )

    cost_per_person = models.PositiveIntegerField(
        default=0,
        help_text="Custo por pessoa"
    )

    class Meta:
        db_table = 'package'
        verbose_name = 'Package'
        verbose_name_plural = 'Packages'
        ordering = ['id']

    def __str__(self):
        return f"[{self.id}] {self.package_name}"


class TicketModel(models.Model):
    """
    Model Django para persistência de Tickets.

    customer_id e package_id são inteiros simples: remover um
    cliente nunca remove seus tickets.

    Fields:
        ticket_id: ID atribuído externamente (primary key)
        customer_id: ID do cliente
        package_id: ID do pacote
        travel_date: Data da viagem
        total_members: Quantidade de viajantes
        total_cost: Custo total calculado na criação/atualização
    """

    ticket_id = models.BigIntegerField(
        primary_key=True,
        help_text="ID do ticket"
    )

    customer_id = models.BigIntegerField(db_index=True)

    package_id = models.BigIntegerField(db_index=True)

    travel_date = models.DateField(db_index=True)

    total_members = models.IntegerField()

    total_cost = models.BigIntegerField(default=0)

    class Meta:
        db_table = 'ticket'
        verbose_name = 'Ticket'
        verbose_name_plural = 'Tickets'
        ordering = ['ticket_id']
        indexes = [
            # Combinações usadas pela busca
            models.Index(fields=['customer_id', 'travel_date'], name='ticket_customer_date_idx'),
            models.Index(fields=['package_id', 'travel_date'], name='ticket_package_date_idx'),
        ]

    def __str__(self):
        return f"[{self.ticket_id}] package={self.package_id} on {self.travel_date}"
