"""Cost sheet simulator for contract and job costing."""
