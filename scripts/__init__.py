"""Maintenance scripts run against the configured MongoDB."""
