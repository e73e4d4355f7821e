"""Packaged configuration data (carrier tables, public holidays)."""
