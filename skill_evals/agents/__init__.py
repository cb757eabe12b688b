"""Models that produce the answers under evaluation."""
