from .settings import DatamodelSettings, settings

__all__ = ["DatamodelSettings", "settings"]
