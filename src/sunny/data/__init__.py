"""Location providers and the static content of the ship's systems."""
