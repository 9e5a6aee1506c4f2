"""pygame front end for Futris: rendering, drop pacing and the play loop."""
