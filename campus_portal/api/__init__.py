"""HTTP surface of the campus portal: FastAPI app, routes and data-service client."""
