"""Platform services (logging) shared by drivepath features."""
