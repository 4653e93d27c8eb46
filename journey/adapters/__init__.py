"""Provider adapters (mock and Mapbox)."""
