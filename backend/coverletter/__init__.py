"""Cover letter and resume bullet generator backend."""
