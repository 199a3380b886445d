from src.linkshort.features.dashboard.handlers import router

__all__ = ["router"]
