"""Local tooling for a channel-backed filesystem: profiles, bundles, status, mounts and garbage reports."""

__version__ = "0.1.0"