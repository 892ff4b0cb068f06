from caisse.ddd.commands import Command, Query
from caisse.ddd.domain_module import DomainModule

__all__ = ["Command", "Query", "DomainModule"]
