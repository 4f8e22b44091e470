"""Adapters – concrete log sink and crash reporter backends."""
