from .health_entry_record import HealthEntryRecord

__all__ = ['HealthEntryRecord']
