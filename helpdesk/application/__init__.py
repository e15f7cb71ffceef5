"""Application services orchestrating storage and the completion provider."""
