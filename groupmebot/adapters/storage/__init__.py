from groupmebot.adapters.storage.csv_audit_log import CsvAuditLog

__all__ = ["CsvAuditLog"]
