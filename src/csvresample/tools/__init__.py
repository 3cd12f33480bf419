"""Optional helpers that sit outside the load/resample/write pipeline."""
