"""HTTP routers for the Book Manager API."""
