"""Default implementations of the authorize endpoint's collaborators."""
