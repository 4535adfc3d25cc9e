"""Project-agnostic support libraries bundled with branchver."""
