"""Building blocks for idempotent machine provisioning from templated manifests."""

__version__ = "0.1.0"