"""Student record management: JSON-file backed REST API plus client."""
