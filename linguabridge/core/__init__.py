"""Resolution engine, data models, configuration and errors."""
