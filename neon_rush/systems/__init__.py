"""Per-tick systems: spawning, motion, collisions, effects, scoring, difficulty."""
