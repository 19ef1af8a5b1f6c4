"""Language normalization, phrase tables, content filtering and providers."""
