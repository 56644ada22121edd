"""
Django app de viagens: clientes, pacotes e tickets.
"""
