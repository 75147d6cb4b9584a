"""AIOrbit insight dashboard backend."""
