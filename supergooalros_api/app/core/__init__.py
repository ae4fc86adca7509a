"""Configuration, logging, storage connections and HTTP helpers."""
