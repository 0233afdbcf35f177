"""Backend integrations for eventgate."""
