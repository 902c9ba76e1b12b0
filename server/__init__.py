"""HTTP surface for running seeded trick simulations."""
