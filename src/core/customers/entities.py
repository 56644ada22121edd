"""
Entidades do Domínio de Clientes.

Entidades:
- CustomerEntity: Cliente cadastrado via sign-up

O ID do cliente é atribuído externamente (informado no sign-up)
e a senha é armazenada como recebida.
"""

from dataclasses import dataclass


@dataclass
class CustomerEntity:
    """
    Entidade de Domínio: Cliente.

    Attributes:
        customer_id: Identificador único (atribuído externamente)
        first_name: Primeiro nome
        last_name: Sobrenome
        email: Endereço de e-mail
        password: Senha (armazenada sem hash)
    """

    customer_id: int
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
