"""AI Studio conversation and preset core."""
