from .store import FieldValue, FormStateStore

__all__ = ["FieldValue", "FormStateStore"]
