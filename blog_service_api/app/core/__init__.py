"""Infrastructure shared by the service: configuration, logging, storage and security."""
