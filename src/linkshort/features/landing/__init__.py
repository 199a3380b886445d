from src.linkshort.features.landing.handlers import router

__all__ = ["router"]
