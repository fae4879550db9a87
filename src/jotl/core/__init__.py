"""Core project resolution and provisioning."""
