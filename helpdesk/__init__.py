"""Helpdesk AI assistant backend."""
