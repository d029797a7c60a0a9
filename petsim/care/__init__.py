"""Care subsystem: care stat decay, care life and poop."""
