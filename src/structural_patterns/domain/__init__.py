"""Domain layer - graphics composition and forest flyweights."""
