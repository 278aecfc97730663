"""Current-temperature lookup service backed by a cache-aside store."""
