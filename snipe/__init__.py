"""Convert between Ethereum block numbers and calendar time."""
