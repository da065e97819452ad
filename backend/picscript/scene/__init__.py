"""Scene graph and its post-pass consumers."""
