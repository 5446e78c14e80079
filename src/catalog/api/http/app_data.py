from dataclasses import dataclass

from src.catalog.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
