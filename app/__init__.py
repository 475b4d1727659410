"""Country Pulse application - models, repositories, services and DI container."""
