"""Alerts application: per-request alert queue, alert type registry and formatters."""
