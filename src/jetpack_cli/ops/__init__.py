"""Operation interfaces for external collaborators (processes, terminal prompts)."""
