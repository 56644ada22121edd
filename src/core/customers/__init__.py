"""
Domínio de Clientes.

Contém:
- Entidades (CustomerEntity)
- Ports (CustomerRepository)
- Use Cases (ListCustomers, GetCustomer, SignUpCustomer, DeleteCustomer)
"""

from .entities import CustomerEntity
from .ports import CustomerRepository, InMemoryCustomerRepository
from .use_cases import (
    ListCustomersService,
    GetCustomerService,
    SignUpCustomerService,
    DeleteCustomerService,
)

__all__ = [
    "CustomerEntity",
    "CustomerRepository",
    "InMemoryCustomerRepository",
    "ListCustomersService",
    "GetCustomerService",
    "SignUpCustomerService",
    "DeleteCustomerService",
]
