from .health_entry_repository import HealthEntryRepository

__all__ = ['HealthEntryRepository']
