"""FastAPI dependencies for authentication context and authorization."""
