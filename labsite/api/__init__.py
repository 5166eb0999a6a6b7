from labsite.api.site import router as site_router

__all__ = ["site_router"]
