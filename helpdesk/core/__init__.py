"""Core domain logic: analysis pipeline, ticket triage and exceptions."""
