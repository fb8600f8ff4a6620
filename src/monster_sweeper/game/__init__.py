"""Player/enemy entities, floor progression and the turn-processing simulation."""
