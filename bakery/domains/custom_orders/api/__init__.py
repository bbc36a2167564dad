from .routes import cake_configuration_router, router

__all__ = ["router", "cake_configuration_router"]
