"""Engine core: configuration, validation, discovery, tracking and the runner."""
