"""Feature packages of drivepath."""
