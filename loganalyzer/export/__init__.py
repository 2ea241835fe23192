from .exporters import export_csv, export_entries, export_json

__all__ = ["export_csv", "export_entries", "export_json"]
