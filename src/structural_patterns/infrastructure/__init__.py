"""Infrastructure layer - technical concerns shared by the domain and CLI."""
