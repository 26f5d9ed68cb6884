"""Google Sheets CSV export client."""

from .client import SheetClient, export_url

__all__ = ["SheetClient", "export_url"]
