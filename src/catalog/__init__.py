"""Product catalog service.

Hexagonal layout: domain entities and use-case services in ``core``/``entities``,
the HTTP adapter in ``api`` and runtime wiring (configuration, logging,
database) in ``runtime``.
"""

__version__ = "0.1.0"
