"""Client for a simple SUI lending pool: deposit, borrow, repay and read state."""
