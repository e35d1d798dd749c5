from app.web_server.web_server import BillSigningWebServer

__all__ = ["BillSigningWebServer"]
