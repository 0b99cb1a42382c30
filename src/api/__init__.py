"""HTTP API: FastAPI app, routers and GraphQL schema."""
