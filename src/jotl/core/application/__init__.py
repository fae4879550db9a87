"""Application layer: resolution, provisioning and the init command."""
