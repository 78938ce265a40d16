"""Truth-model spacecraft plant: two-body orbit and rigid-body attitude propagation for GNC simulation."""

__version__ = "0.1.0"