"""
punctseg Providers Package

Adapters that implement punctseg's injected Logger protocol. Components
never log on their own; the host application passes one of these (or its
own implementation) as the ``logger`` argument.
"""

from .logging_adapter import StdlibLogger, ConsoleLogger, create_stdlib_logger

__all__ = ['StdlibLogger', 'ConsoleLogger', 'create_stdlib_logger']
