"""Domain records (JSON shapes) shared by routers and tests."""
