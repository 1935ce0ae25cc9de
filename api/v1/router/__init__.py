from api.v1.router.contact import contact_router

__all__ = ["contact_router"]
