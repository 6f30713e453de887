"""Terminal prompts and the directory navigator."""
