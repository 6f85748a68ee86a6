"""Layout engine: curve mapping, label measurement, cluster spreading, placement."""
