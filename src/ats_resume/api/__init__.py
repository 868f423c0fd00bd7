"""HTTP API for rendering and exporting resumes."""
