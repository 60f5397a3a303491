"""Tally CRM HTTP backend."""
