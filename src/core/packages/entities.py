"""
Entidades do Domínio de Pacotes de Viagem.

Entidades:
- PackageEntity: Pacote com custo por pessoa

Regras de Negócio Encapsuladas:
- Cálculo do custo total de uma reserva a partir do número de membros
"""

from dataclasses import dataclass


@dataclass
class PackageEntity:
    """
    Entidade de Domínio: Pacote de viagem.

    Attributes:
        id: Identificador único do pacote
        package_name: Nome do pacote
        trip_duration: Duração da viagem em texto livre (ex: "2 Days")
        cost_per_person: Custo por pessoa em unidades inteiras (>= 0)
    """

    id: int
    package_name: str = ""
    trip_duration: str = ""
    cost_per_person: int = 0

    def cost_for(self, total_members: int) -> int:
        """
        Calcula custo total para a quantidade de membros informada.

        Args:
            total_members: Quantidade de viajantes

        Returns:
            total_members × cost_per_person
        """
        return total_members * self.cost_per_person
