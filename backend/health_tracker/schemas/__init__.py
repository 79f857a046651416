from .health_entry_schemas import HealthEntrySchema

__all__ = ['HealthEntrySchema']
