"""Pure board algorithms: solvability, generation, and moves."""
