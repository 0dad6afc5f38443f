"""Infrastructure layer: filesystem access."""
