"""Clients for external recipe data sources."""
