"""Backend client, dashboard controller and derived statistics."""
